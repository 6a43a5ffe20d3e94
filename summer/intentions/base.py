from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Optional, Set, Type, TypeVar, get_args

from ..tree.model import SyntaxNode

if TYPE_CHECKING:
    from ..document import EditorDocument

__all__ = ["BaseIntention", "Priority", "IntentionOutcome"]

C = TypeVar("C")  # configuration type of a concrete intention
I = TypeVar("I", bound="BaseIntention[Any]")


class Priority(Enum):
    """Ordering hint for the list of actions offered at the caret."""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    TOP = "top"


class IntentionOutcome(Enum):
    """What an invocation did to the document."""
    INSERTED = "inserted"
    ALREADY_PRESENT = "already_present"
    NO_PROXY_PROPERTY = "no_proxy_property"
    NO_PRESENTER_CLASS = "no_presenter_class"
    NOT_APPLICABLE = "not_applicable"

    @property
    def changed(self) -> bool:
        return self is IntentionOutcome.INSERTED


class BaseIntention(Generic[C]):
    """Base class of caret-triggered source edits."""
    #: Registry key, also the key of the intention's section in summer.yaml
    name: str = "base"
    #: File extensions the intention works on
    extensions: Set[str] = set()
    #: Label shown in the list of available actions
    text: str = ""
    #: Family name, groups intentions of one kind
    family_name: str = ""
    priority: Priority = Priority.NORMAL
    #: The host opens the write action before invoke() when True
    start_in_write_action: bool = True
    _cfg: Optional[C]

    # --- generic introspection of C -----
    @classmethod
    def _resolve_cfg_type(cls) -> Type[C] | None:
        """
        Extract the concrete C from a subclass declared as BaseIntention[C].
        Returns None when the intention takes no configuration.
        """
        for kls in cls.__mro__:
            for base in getattr(kls, "__orig_bases__", ()) or ():
                args = get_args(base) or ()
                if args and not isinstance(args[0], TypeVar):
                    return args[0]
        return None

    # --- configuration -------------
    @classmethod
    def bind(cls: Type[I], raw_cfg: dict | None = None) -> I:
        """Create an instance with its configuration applied."""
        inst = cls()
        inst._cfg = cls._load_cfg(raw_cfg)
        return inst

    @classmethod
    def _load_cfg(cls, raw_cfg: dict | None) -> C:
        """
        Build the configuration through the config type's static ``from_dict``
        when it has one, otherwise by passing the mapping as keyword arguments.
        """
        cfg_type = cls._resolve_cfg_type()
        if cfg_type is None:
            return None

        cfg_input: dict[str, Any] = dict(raw_cfg or {})

        from_dict = getattr(cfg_type, "from_dict", None)
        if callable(from_dict):
            return from_dict(cfg_input)

        try:
            return cfg_type(**cfg_input)
        except TypeError as e:
            raise TypeError(
                f"{cls.__name__}: cannot construct {cfg_type.__name__} from raw config keys "
                f"{sorted(cfg_input.keys())}; consider implementing {cfg_type.__name__}.from_dict(). "
                f"Original error: {e}"
            ) from e

    @property
    def cfg(self) -> C:
        if getattr(self, "_cfg", None) is None:
            raise AttributeError(f"{self.__class__.__name__} has no bound config")
        return self._cfg

    # --- overridable logic ------------------
    def is_available(self, document: EditorDocument, node: Optional[SyntaxNode]) -> bool:
        """
        True when the intention should be offered for the leaf at the caret.
        Must not raise and must not modify the document.
        """
        return False

    def invoke(self, document: EditorDocument, node: SyntaxNode) -> IntentionOutcome:
        """Apply the edit. Runs inside the document's write action."""
        raise NotImplementedError
