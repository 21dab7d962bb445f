"""
Option types for the coercion functions.

Each coercer owns a frozen dataclass describing the options it accepts. The
schema of every option (allowed types and an optional normalizer) lives in
the dataclass field metadata, and is enforced when an instance is built.
``CoerceOptions`` is the shared base supplying ``default``, the value returned
whenever coercion fails.

Resolution failures are programmer errors and raise ``InvalidConfiguration``
before the input value is ever inspected.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from datetime import tzinfo
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar, Union
from zoneinfo import ZoneInfo

from .exceptions import InvalidConfiguration
from .utils.normalization import normalize_option_name

NoneType = type(None)

T = TypeVar("T", bound="CoerceOptions")

OptionsInput = Union["CoerceOptions", Mapping[str, Any], None]


def option(
    default: Any,
    types: Optional[Tuple[type, ...]] = None,
    normalizer: Optional[Callable[[Any], Any]] = None,
) -> Any:
    """
    Declare an option field.

    Args:
        default: Value used when the caller does not supply the option.
        types: Allowed value types; None accepts anything. ``bool`` only
            satisfies the schema when listed explicitly.
        normalizer: Callable applied to the supplied value once its type
            has been checked.
    """
    return field(default=default, metadata={"types": types, "normalizer": normalizer})


def _matches_types(value: Any, allowed: Optional[Tuple[type, ...]]) -> bool:
    if allowed is None:
        return True
    if isinstance(value, bool):
        return bool in allowed
    return isinstance(value, allowed)


def _describe_types(allowed: Tuple[type, ...]) -> str:
    names = ["None" if t is NoneType else t.__name__ for t in allowed]
    return '", "'.join(names)


@dataclass(frozen=True)
class CoerceOptions:
    """Options shared by every coercer."""

    default: Any = option(None)

    def __post_init__(self) -> None:
        for field_def in fields(self):
            value = getattr(self, field_def.name)
            allowed = field_def.metadata.get("types")
            if not _matches_types(value, allowed):
                raise InvalidConfiguration(
                    f'The option "{field_def.name}" with value {value!r} is expected '
                    f'to be of type "{_describe_types(allowed)}", but is of type '
                    f'"{type(value).__name__}".',
                    option=field_def.name,
                )

            normalizer = field_def.metadata.get("normalizer")
            if normalizer is None:
                continue
            try:
                normalized = normalizer(value)
            except Exception as exc:
                raise InvalidConfiguration(
                    f'The option "{field_def.name}" with value {value!r} is invalid: {exc}',
                    option=field_def.name,
                ) from exc
            object.__setattr__(self, field_def.name, normalized)

    @classmethod
    def option_names(cls) -> Tuple[str, ...]:
        return tuple(sorted(field_def.name for field_def in fields(cls)))

    @classmethod
    def resolve(
        cls: Type[T],
        options: OptionsInput = None,
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> T:
        """
        Build a fully populated options instance.

        Args:
            options: None, a mapping of option names (snake_case or
                camelCase) to values, or an options instance.
            overrides: Keyword options; these win over ``options``.

        Returns:
            An instance of ``cls`` with every option set.

        Raises:
            InvalidConfiguration: If an option is unknown, has the wrong type
                or cannot be normalized.
        """
        if isinstance(options, cls) and not overrides:
            return options

        supplied: Dict[Any, Any] = {}
        if isinstance(options, CoerceOptions):
            supplied.update(options.as_dict())
        elif isinstance(options, Mapping):
            supplied.update(options)
        elif options is not None:
            raise InvalidConfiguration(
                f"Options must be a mapping or a {cls.__name__}, "
                f"got {type(options).__name__}."
            )
        if overrides:
            supplied.update(overrides)

        known = cls.option_names()
        values: Dict[str, Any] = {}
        for raw_name, value in supplied.items():
            name = normalize_option_name(raw_name) if isinstance(raw_name, str) else raw_name
            if name not in known:
                raise InvalidConfiguration(
                    f'The option "{raw_name}" does not exist. Defined options '
                    f'are: "{", ".join(known)}".',
                    option=str(raw_name),
                )
            values[name] = value
        return cls(**values)

    def as_dict(self) -> Dict[str, Any]:
        return {field_def.name: getattr(self, field_def.name) for field_def in fields(self)}


@dataclass(frozen=True)
class BoolOptions(CoerceOptions):
    """Options for ``to_bool``."""


@dataclass(frozen=True)
class EmailAddressOptions(CoerceOptions):
    """Options for ``to_email_address``."""


@dataclass(frozen=True)
class FloatOptions(CoerceOptions):
    """
    Options for ``to_float``.

    Attributes:
        allow_zero: When false, a zero result (after clamping) is a failure.
        no_greater_than: Upper bound the result is clamped to.
        no_less_than: Lower bound the result is clamped to; applied after
            the upper bound, so it wins when the bounds are inverted.
    """

    allow_zero: bool = option(True, (bool,))
    no_greater_than: Optional[float] = option(None, (int, float, NoneType))
    no_less_than: Optional[float] = option(None, (int, float, NoneType))


@dataclass(frozen=True)
class IntOptions(FloatOptions):
    """Options for ``to_int``; bounds are applied before truncation."""


@dataclass(frozen=True)
class _TextOptions(CoerceOptions):
    allow_blank: bool = option(True, (bool,))
    compact_whitespace: bool = option(False, (bool,))
    max_length: Optional[int] = option(None, (int, NoneType))


@dataclass(frozen=True)
class StringOptions(_TextOptions):
    """
    Options for ``to_string``.

    Attributes:
        allow_blank: When false, empty or whitespace-only results fail.
        compact_whitespace: Collapse every whitespace run to one space.
        max_length: Truncate to this many characters; zero or less means
            no limit.
        trim_whitespace: Strip leading/trailing whitespace, including after
            truncation.
    """

    trim_whitespace: bool = option(False, (bool,))


@dataclass(frozen=True)
class PlainTextOptions(_TextOptions):
    """Options for ``to_plain_text``; whitespace is always trimmed."""


def _normalize_timezone(value: Union[str, tzinfo, None]) -> Optional[tzinfo]:
    if isinstance(value, str):
        return ZoneInfo(value)
    return value


@dataclass(frozen=True)
class DateTimeOptions(CoerceOptions):
    """
    Options for ``to_datetime``.

    Attributes:
        immutable: True for ``datetime``, false for ``MutableDateTime``;
            None preserves the flavor of a date-time input.
        tz: Zone name or ``tzinfo`` applied to text without an explicit
            offset; None uses the input's own zone, then the default zone.
    """

    immutable: Optional[bool] = option(None, (bool, NoneType))
    tz: Optional[tzinfo] = option(
        None, (str, tzinfo, NoneType), normalizer=_normalize_timezone
    )
