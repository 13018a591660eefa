from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    Any,
    ClassVar,
    Dict,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    Type,
    TypeVar,
)

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from .errors import DecodeError


@dataclass(frozen=True)
class ResourceDescriptor:
    """Static per-type configuration: where the resource lives and which
    parameters every request for it carries."""

    base_path: str = ""
    default_params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "default_params", MappingProxyType(dict(self.default_params))
        )


class Requestable(BaseModel):
    """Base class for domain objects served by a REST resource.

    Subclasses declare ``base_path`` and, optionally, ``default_params``.

    Examples:
        ```python
        class Contact(Requestable):
            base_path: ClassVar[str] = "/contacts"
            default_params: ClassVar[Dict[str, Any]] = {"fields": ["name"]}

            id: int
            name: str
        ```
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        use_enum_values=True,
        arbitrary_types_allowed=True,
        extra="allow",
    )

    base_path: ClassVar[str] = ""
    default_params: ClassVar[Dict[str, Any]] = {}

    @classmethod
    def descriptor(cls) -> ResourceDescriptor:
        return ResourceDescriptor(
            base_path=cls.base_path, default_params=cls.default_params
        )

    @classmethod
    def title_for_index(cls, index: int) -> str:
        return ""

    @classmethod
    def object_for_header(
        cls,
        grouped_objects: Sequence[Sequence["Requestable"]],
        ungrouped_objects: Sequence["Requestable"],
        index: int,
    ) -> Optional[Any]:
        return None

    def section_key(self) -> str:
        return ""


T = TypeVar("T", bound=Requestable)


class Decoder(Protocol):
    """Turns JSON values into typed domain objects.

    Implementations raise ``DecodeError`` when the value does not fit.
    """

    def decode(self, model: Type[T], value: Any) -> T: ...

    def decode_many(self, model: Type[T], value: Any) -> List[T]: ...


class ModelDecoder:
    """Decoder backed by pydantic validation."""

    def decode(self, model: Type[T], value: Any) -> T:
        if not isinstance(value, Mapping):
            raise DecodeError(
                f"Expected a JSON object for {model.__name__}, "
                f"got {type(value).__name__}",
                payload=value,
            )
        try:
            return model.model_validate(value)
        except ValidationError as e:
            raise DecodeError(
                f"Could not decode {model.__name__}: {e}", payload=value
            ) from e

    def decode_many(self, model: Type[T], value: Any) -> List[T]:
        if not isinstance(value, list):
            raise DecodeError(
                f"Expected a JSON array of {model.__name__}, "
                f"got {type(value).__name__}",
                payload=value,
            )
        try:
            return TypeAdapter(List[model]).validate_python(value)  # type: ignore[valid-type]
        except ValidationError as e:
            raise DecodeError(
                f"Could not decode list of {model.__name__}: {e}", payload=value
            ) from e
