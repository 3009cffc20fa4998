"""Link widget coloured by object kind."""

from typing import ClassVar

from textual.widgets import Static

from wikitheme.kinds import ObjectKind, classify


class KindLink(Static):
    """A wiki link whose background follows its object kind.

    Labels that are not a known kind get no kind class and render with the
    plain link style.
    """

    DEFAULT_CSS: ClassVar[str] = """
    KindLink {
        width: auto;
        height: 1;
        padding: 0 1;
        color: $link-text;
    }

    KindLink.atom {
        background: $atom;
    }

    KindLink.atom:hover {
        background: $atom-hover;
    }

    KindLink.relation {
        background: $relation;
    }

    KindLink.relation:hover {
        background: $relation-hover;
    }

    KindLink.abstract {
        background: $abstract;
    }

    KindLink.abstract:hover {
        background: $abstract-hover;
    }
    """

    def __init__(
        self,
        label: str,
        tag: str | None,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the KindLink widget.

        Args:
            label: Text shown for the link.
            tag: Object kind label, e.g. 'atom'.
            name: The name of the widget.
            id: The ID of the widget in the DOM.
            classes: Extra CSS classes for the widget.
        """
        kind = classify(tag)
        kind_classes = [kind.css_class] if kind is not None else []
        if classes:
            kind_classes.append(classes)
        super().__init__(label, name=name, id=id, classes=" ".join(kind_classes) or None)
        self.kind: ObjectKind | None = kind
        self.tag = tag

    @property
    def is_styled(self) -> bool:
        """Whether the link carries a kind style."""
        return self.kind is not None
