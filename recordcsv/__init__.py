"""
recordcsv: map CSV rows to and from dataclass records (stdlib-only).

Contract:
- A record type is a dataclass. Each field may carry a tag in its metadata
  under "csv" (or via the `column()` helper):
    field(metadata={"csv": "Name"})         -> column "Name"
    field(metadata={"csv": "Name,index=0"}) -> column "Name" at position 0
    field(metadata={"csv": ",index=2"})     -> attribute name, position 2
    field(metadata={"csv": "-"})            -> never mapped
- Column order: fields with index=N sit at N; the rest follow in declaration
  order starting just above the highest explicit N.
- Reading: the first non-blank row is the header. Header cells are matched
  (whitespace-stripped) against declared names; unknown columns are ignored,
  missing columns leave the field at its default (or zero value).
  Blank rows are skipped.
- Value rules, in order:
    type with from_csv()/to_csv() hooks -> the hooks, nothing else
    datetime -> RFC 3339, seconds + offset ("2023-01-02T15:04:05Z")
    str -> as is; int -> base 10, 64-bit; float -> shortest decimal; bool -> true/false
    subclasses of str/int/float use their base rule
    Optional[X] -> "" <-> None, else X's rule
  Anything else raises UnsupportedTypeError when a value is converted.
- Writing: header on first write (or writeheader()), then one row per record,
  flushing the sink after every row.

API (csv-like):
- reader(f, record_type, ...) -> Reader; Reader.all() / iter(Reader) -> records
- writer(f, record_type, ...) -> Writer; writeheader(), writerow(), writerows()
- select(predicate, iterable) -> lazy filtered iterator

Python: 3.10+
"""

from __future__ import annotations

import csv
import dataclasses
import enum
import functools
import logging
import math
import numbers
import operator
import re
import types
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Protocol,
    Tuple,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

T = TypeVar("T")


# ----------------------------
# Exceptions
# ----------------------------

class RecordCSVError(Exception):
    """Base class for every error raised by recordcsv."""


class ConfigurationError(RecordCSVError, TypeError):
    """The record type cannot be mapped (not a dataclass, bad field tag)."""


class HeaderError(RecordCSVError):
    """No header row could be read from the input."""


class FormatError(RecordCSVError, ValueError):
    """Raised when a cell's text (or a field's value) does not fit its type."""

    def __init__(
        self,
        *,
        reason: str,
        row: int = 0,
        col: int = -1,
        column: str = "",
        field: str = "",
        value: str = "",
    ) -> None:
        msg = (
            "FormatError(" +
            f"row={row}, col={col}, column={column!r}, "
            f"field={field!r}, value={value!r}): {reason}"
        )
        super().__init__(msg)
        self.row = row          # 1-based CSV line number, 0 outside a reader/writer
        self.col = col          # 0-based column index, -1 when unknown
        self.column = column    # declared column name
        self.field = field      # dataclass attribute name
        self.value = value      # offending text (or repr of the value on write)
        self.reason = reason


class UnsupportedTypeError(RecordCSVError, TypeError):
    """A field's type has no conversion rule and no custom hooks."""

    def __init__(self, type_: Any, *, field: str = "") -> None:
        where = f" (field {field!r})" if field else ""
        super().__init__(f"Unsupported field type: {_type_name(type_)}{where}")
        self.type = type_
        self.field = field


def _type_name(tp: Any) -> str:
    return getattr(tp, "__qualname__", None) or repr(tp)


# ----------------------------
# Configuration
# ----------------------------

@dataclass(frozen=True)
class ValueDialect:
    # exact-match tokens accepted when reading bools
    bool_true: Tuple[str, ...] = ("1", "t", "T", "TRUE", "true", "True")
    bool_false: Tuple[str, ...] = ("0", "f", "F", "FALSE", "false", "False")
    # tokens emitted when writing bools
    true_token: str = "true"
    false_token: str = "false"
    timestamp_parser: Callable[[str], datetime] = staticmethod(lambda s: parse_timestamp(s))
    timestamp_formatter: Callable[[datetime], str] = staticmethod(lambda dt: format_timestamp(dt))


DEFAULT = ValueDialect()

SKIP = "-"
TAG_KEY = "csv"

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


# ----------------------------
# Custom hooks
# ----------------------------

@runtime_checkable
class CSVDecodable(Protocol):
    """Types that build themselves from a cell: `T.from_csv(text) -> T`."""

    @classmethod
    def from_csv(cls, text: str) -> Any: ...


@runtime_checkable
class CSVEncodable(Protocol):
    """Values that render themselves as a cell: `value.to_csv() -> str`."""

    def to_csv(self) -> str: ...


def has_decode_hook(tp: Any) -> bool:
    return isinstance(tp, type) and isinstance(tp, CSVDecodable)


def has_encode_hook(tp: Any) -> bool:
    return isinstance(tp, type) and isinstance(tp, CSVEncodable)


# ----------------------------
# Field resolution
# ----------------------------

@dataclass(frozen=True)
class FieldDescriptor:
    name: str                  # declared column name
    attr: str                  # dataclass attribute
    ordinal: int               # resolved column position
    explicit: bool             # ordinal came from index=N
    skip: bool                 # tagged "-"
    type: Any                  # resolved annotation, Optional[...] unwrapped
    optional: bool = False     # annotation was Optional[type]


def column(tag: str = "", **kwargs: Any) -> Any:
    """
    Shorthand for `dataclasses.field(metadata={"csv": tag}, **kwargs)`.

        @dataclass
        class Person:
            name: str = column("Name", default="")
            age: int = column("Age,index=0", default=0)
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return field(metadata=metadata, **kwargs)


def parse_field_tag(attr: str, tag: str) -> Tuple[str, Optional[int], bool]:
    """
    Parse a field tag into (name, explicit ordinal or None, skip).

    Component 0 is the column name ("" means the attribute name, "-" skips the
    field); the rest are key=value pairs of which only index= is understood.
    """
    parts = [p.strip() for p in tag.split(",")]
    name = parts[0]
    if name == SKIP:
        return SKIP, None, True
    if not name:
        name = attr

    ordinal: Optional[int] = None
    for part in parts[1:]:
        key, sep, value = part.partition("=")
        if key.strip() != "index" or not sep:
            continue
        value = value.strip()
        if not value.isascii() or not value.isdigit():
            raise ConfigurationError(
                f"Invalid index value {value!r} in field {attr!r}: expected a non-negative integer"
            )
        ordinal = int(value)
    return name, ordinal, False


def _unwrap_optional(tp: Any) -> Tuple[Any, bool]:
    origin = get_origin(tp)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = get_args(tp)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(args) == 2:
            return rest[0], True
    return tp, False


def _check_record_type(record_type: Any) -> None:
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise ConfigurationError(f"Record type must be a dataclass, got {record_type!r}")


def resolve_fields(record_type: type) -> Tuple[FieldDescriptor, ...]:
    """
    Resolve the column layout of a dataclass record type.

    Returns the mapped (non-skipped) fields sorted by ordinal. Fields without
    index= get ordinals after the highest explicit one, in declaration order;
    the sort is stable, so ties keep declaration order. Results are cached per
    record type.
    """
    _check_record_type(record_type)
    return _resolve_fields(record_type)


@functools.lru_cache(maxsize=None)
def _resolve_fields(record_type: type) -> Tuple[FieldDescriptor, ...]:
    try:
        hints = get_type_hints(record_type)
    except Exception as e:
        raise ConfigurationError(
            f"Cannot resolve field types of {_type_name(record_type)}: {e}"
        ) from e

    pending: List[Tuple[str, str, Optional[int], Any, bool]] = []
    max_explicit = -1
    for f in dataclasses.fields(record_type):
        if not f.init:
            continue
        name, ordinal, skip = parse_field_tag(f.name, str(f.metadata.get(TAG_KEY, "")))
        if skip:
            continue
        if ordinal is not None and ordinal > max_explicit:
            max_explicit = ordinal
        tp, optional = _unwrap_optional(hints.get(f.name, Any))
        pending.append((name, f.name, ordinal, tp, optional))

    next_ordinal = max_explicit + 1
    out: List[FieldDescriptor] = []
    for name, attr, ordinal, tp, optional in pending:
        explicit = ordinal is not None
        if not explicit:
            ordinal = next_ordinal
            next_ordinal += 1
        out.append(FieldDescriptor(
            name=name,
            attr=attr,
            ordinal=ordinal,
            explicit=explicit,
            skip=False,
            type=tp,
            optional=optional,
        ))

    out.sort(key=lambda d: d.ordinal)
    logger.debug(
        "Resolved %s columns: %s",
        _type_name(record_type),
        ", ".join(f"{d.name}={d.ordinal}" for d in out),
    )
    return tuple(out)


def _zero_factory(f: dataclasses.Field, hints: Mapping[str, Any]) -> Callable[[], Any]:
    if f.default is not dataclasses.MISSING:
        default = f.default
        return lambda: default
    if f.default_factory is not dataclasses.MISSING:
        return f.default_factory
    tp, optional = _unwrap_optional(hints.get(f.name, Any))
    if optional or not isinstance(tp, type):
        return lambda: None
    if tp in (str, int, float, bool):
        return tp

    def zero() -> Any:
        try:
            return tp()
        except TypeError:
            return None

    return zero


def _zero_factories(record_type: type) -> Dict[str, Callable[[], Any]]:
    hints = get_type_hints(record_type)
    return {
        f.name: _zero_factory(f, hints)
        for f in dataclasses.fields(record_type)
        if f.init
    }


# ----------------------------
# Value codecs (parse/format)
# ----------------------------

_INT_RE = re.compile(r"[+-]?[0-9]+")
_TIMESTAMP_RE = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}"
    r"(\.[0-9]{1,9})?(Z|[+-][0-9]{2}:[0-9]{2})"
)


def parse_timestamp(raw: str) -> datetime:
    """
    Parse RFC 3339 with seconds and an offset ("Z" or "+hh:mm").
    Up to 9 fractional digits are accepted; past 6 they are truncated.
    """
    m = _TIMESTAMP_RE.fullmatch(raw)
    if m is None:
        raise ValueError(f"Invalid RFC 3339 timestamp: {raw!r}")
    frac = m.group(1)
    if not frac:
        return datetime.strptime(raw, "%Y-%m-%dT%H:%M:%S%z")
    text = raw[:m.start(1)] + frac[:7] + raw[m.end(1):]
    return datetime.strptime(text, "%Y-%m-%dT%H:%M:%S.%f%z")


def format_timestamp(dt: datetime) -> str:
    """Render as RFC 3339 in UTC, whole seconds. Naive values are taken as UTC."""
    if not isinstance(dt, datetime):
        raise ValueError(f"Expected a datetime, got {dt!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def _check_int64(n: int) -> int:
    if not INT64_MIN <= n <= INT64_MAX:
        raise ValueError(f"Integer out of 64-bit range: {n}")
    return n


def _parse_int(raw: str) -> int:
    if _INT_RE.fullmatch(raw) is None:
        raise ValueError(f"Invalid integer literal: {raw!r}")
    return _check_int64(int(raw))


def _format_int(v: Any) -> str:
    try:
        n = operator.index(v)
    except TypeError:
        raise ValueError(f"Expected an integer, got {v!r}") from None
    return str(_check_int64(n))


def _parse_float(raw: str) -> float:
    if raw != raw.strip() or "_" in raw:
        raise ValueError(f"Invalid float literal: {raw!r}")
    return float(raw)


def _format_float(v: Any) -> str:
    """Shortest round-tripping digits, never in exponent form ("1e16" -> "10000000000000000")."""
    if isinstance(v, bool) or not isinstance(v, numbers.Real):
        raise ValueError(f"Expected a float, got {v!r}")
    f = float(v)
    if math.isnan(f) or math.isinf(f):
        return repr(f)
    text = format(Decimal(repr(f)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_bool(raw: str, td: ValueDialect) -> bool:
    if raw in td.bool_true:
        return True
    if raw in td.bool_false:
        return False
    raise ValueError(f"Invalid bool literal: {raw!r}")


def _format_bool(v: Any, td: ValueDialect) -> str:
    if not isinstance(v, bool):
        raise ValueError(f"Expected a bool, got {v!r}")
    return td.true_token if v else td.false_token


def _parse_str(raw: str) -> str:
    return raw


def _format_str(v: Any) -> str:
    if not isinstance(v, str):
        raise ValueError(f"Expected a str, got {v!r}")
    return v if type(v) is str else str.__str__(v)


def _hook_codec(tp: type) -> Tuple[Callable[[str], Any], Callable[[Any], str]]:
    def parse(raw: str) -> Any:
        return tp.from_csv(raw)

    def fmt(v: Any) -> str:
        out = v.to_csv()
        if not isinstance(out, str):
            raise ValueError(f"{_type_name(tp)}.to_csv() returned {type(out).__name__}, expected str")
        return out

    return parse, fmt


def _unsupported_codec(tp: Any) -> Tuple[Callable[[str], Any], Callable[[Any], str]]:
    def parse(raw: str) -> Any:
        raise UnsupportedTypeError(tp)

    def fmt(v: Any) -> str:
        raise UnsupportedTypeError(tp)

    return parse, fmt


def get_codec(
    tp: Any,
    td: ValueDialect = DEFAULT,
) -> Tuple[Callable[[str], Any], Callable[[Any], str]]:
    """
    Return (parser, formatter) for a field type.

    Hooks win over everything; a type with only one of the two hooks falls
    back to the built-in rules for the other direction. Parsers and formatters
    raise ValueError on bad input and UnsupportedTypeError when no rule applies.

    For Optional[X] the empty cell is None and None is the empty cell; X's
    hooks are not called for those, only for non-empty text and non-None values.
    Subclasses of str/int/float are converted by their base rule and rebuilt
    with the subclass, so `class UserId(int)` or an IntEnum reads and writes
    as an integer.
    """
    inner, optional = _unwrap_optional(tp)
    if optional:
        parse, fmt = get_codec(inner, td)
        return (
            (lambda s: None if s == "" else parse(s)),
            (lambda v: "" if v is None else fmt(v)),
        )

    hook_parse, hook_fmt = _hook_codec(tp)
    builtin_parse, builtin_fmt = _builtin_codec(tp, td)
    return (
        hook_parse if has_decode_hook(tp) else builtin_parse,
        hook_fmt if has_encode_hook(tp) else builtin_fmt,
    )


def _builtin_codec(tp: Any, td: ValueDialect) -> Tuple[Callable[[str], Any], Callable[[Any], str]]:
    if isinstance(tp, type) and issubclass(tp, datetime):
        return td.timestamp_parser, td.timestamp_formatter
    if not isinstance(tp, type):
        return _unsupported_codec(tp)
    if issubclass(tp, bool):
        return (lambda s: _parse_bool(s, td)), (lambda v: _format_bool(v, td))
    for base, parse, fmt in (
        (int, _parse_int, _format_int),
        (float, _parse_float, _format_float),
        (str, _parse_str, _format_str),
    ):
        if tp is base:
            return parse, fmt
        if issubclass(tp, base):
            return _rebuild(tp, parse), fmt
    return _unsupported_codec(tp)


def _rebuild(tp: type, parse: Callable[[str], Any]) -> Callable[[str], Any]:
    def parse_as(raw: str) -> Any:
        return tp(parse(raw))

    return parse_as


def _run_parser(
    parser: Callable[[str], Any],
    raw: str,
    fd: Optional[FieldDescriptor] = None,
    *,
    row: int = 0,
    col: int = -1,
) -> Any:
    try:
        return parser(raw)
    except FormatError:
        raise
    except UnsupportedTypeError as e:
        if fd is None:
            raise
        raise UnsupportedTypeError(e.type, field=fd.attr) from e
    except ValueError as e:
        raise FormatError(
            row=row, col=col,
            column=fd.name if fd else "", field=fd.attr if fd else "",
            value=raw, reason=f"Parse failed: {e}",
        ) from e


def _run_formatter(
    formatter: Callable[[Any], str],
    value: Any,
    fd: Optional[FieldDescriptor] = None,
    *,
    row: int = 0,
    col: int = -1,
) -> str:
    try:
        return formatter(value)
    except FormatError:
        raise
    except UnsupportedTypeError as e:
        if fd is None:
            raise
        raise UnsupportedTypeError(e.type, field=fd.attr) from e
    except ValueError as e:
        raise FormatError(
            row=row, col=col,
            column=fd.name if fd else "", field=fd.attr if fd else "",
            value=repr(value), reason=f"Format failed: {e}",
        ) from e


def decode_value(tp: Any, text: str, td: ValueDialect = DEFAULT) -> Any:
    """Convert one cell to a value of type `tp`."""
    return _run_parser(get_codec(tp, td)[0], text)


def encode_value(tp: Any, value: Any, td: ValueDialect = DEFAULT) -> str:
    """Convert one value declared as `tp` to its cell text."""
    return _run_formatter(get_codec(tp, td)[1], value)


# ----------------------------
# Reader
# ----------------------------

class ReaderState(enum.Enum):
    INITIALIZING = "initializing"
    READY = "ready"
    STREAMING = "streaming"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class Reader:
    """Reads the header row, then yields one `record_type` instance per data row."""

    def __init__(
        self,
        f: Iterable[str],
        record_type: type,
        dialect: Union[str, csv.Dialect] = "excel",
        *,
        value_dialect: ValueDialect = DEFAULT,
        **fmtparams: Any,
    ) -> None:
        self.state = ReaderState.INITIALIZING
        self.record_type = record_type
        self._csv = csv.reader(f, dialect=dialect, **fmtparams)
        self._td = value_dialect

        self.headers = self._read_header()
        self.fields = resolve_fields(record_type)
        self.mapping: Mapping[int, FieldDescriptor] = types.MappingProxyType(self._build_mapping())

        self._parsers = [
            (idx, fd, get_codec(fd.type, value_dialect)[0])
            for idx, fd in sorted(self.mapping.items())
        ]
        self._zeros = _zero_factories(record_type)
        self.state = ReaderState.READY

    @property
    def line_num(self) -> int:
        return self._csv.line_num

    def _read_header(self) -> List[str]:
        try:
            for row in self._csv:
                if row:
                    return row
        except csv.Error as e:
            raise HeaderError(f"Could not read header row: {e}") from e
        raise HeaderError("Could not read header row: input is empty")

    def _build_mapping(self) -> Dict[int, FieldDescriptor]:
        by_name: Dict[str, int] = {}
        for i, cell in enumerate(self.headers):
            by_name[cell.strip()] = i

        mapping: Dict[int, FieldDescriptor] = {}
        for fd in self.fields:
            idx = by_name.get(fd.name)
            if idx is not None:
                mapping[idx] = fd

        ignored = [h for i, h in enumerate(self.headers) if i not in mapping]
        unmapped = [fd.name for fd in self.fields if fd.name not in by_name]
        logger.debug(
            "Header mapped for %s: %s; ignored columns %s; unmapped fields %s",
            _type_name(self.record_type),
            {i: fd.attr for i, fd in sorted(mapping.items())},
            ignored,
            unmapped,
        )
        return mapping

    def all(self) -> Iterator[Any]:
        """
        Lazy, single-pass iterator over the decoded records.

        Only the first call streams; later calls yield nothing. Stopping early
        is fine. Decode errors and tokenizer errors propagate out of the
        iteration and leave the reader FAILED.
        """
        if self.state is not ReaderState.READY:
            return iter(())
        self.state = ReaderState.STREAMING
        return self._stream()

    def __iter__(self) -> Iterator[Any]:
        return self.all()

    def _stream(self) -> Iterator[Any]:
        try:
            for row in self._csv:
                if not row:
                    logger.debug("Skipping blank row at line %d", self._csv.line_num)
                    continue
                yield self._decode_row(row)
        except Exception:
            self.state = ReaderState.FAILED
            raise
        self.state = ReaderState.EXHAUSTED

    def _decode_row(self, row: List[str]) -> Any:
        values: Dict[str, Any] = {}
        for idx, fd, parser in self._parsers:
            if idx < len(row):
                values[fd.attr] = _run_parser(parser, row[idx], fd, row=self._csv.line_num, col=idx)
        for attr, zero in self._zeros.items():
            if attr not in values:
                values[attr] = zero()
        return self.record_type(**values)


def reader(
    f: Iterable[str],
    record_type: type,
    dialect: Union[str, csv.Dialect] = "excel",
    *,
    value_dialect: ValueDialect = DEFAULT,
    **fmtparams: Any,
) -> Reader:
    return Reader(f, record_type, dialect=dialect, value_dialect=value_dialect, **fmtparams)


# ----------------------------
# Writer
# ----------------------------

class WriterState(enum.Enum):
    INITIALIZING = "initializing"
    HEADER_PENDING = "header_pending"
    STREAMING = "streaming"


class Writer:
    """
    Writes `record_type` instances as CSV rows.
    - Column order is the resolved field order, for the header and every row.
    - The header is written once, before the first row.
    - The sink is flushed after every row it receives.
    """

    def __init__(
        self,
        f: Any,
        record_type: type,
        dialect: Union[str, csv.Dialect] = "excel",
        *,
        value_dialect: ValueDialect = DEFAULT,
        **fmtparams: Any,
    ) -> None:
        self.state = WriterState.INITIALIZING
        self.record_type = record_type
        self.fields = resolve_fields(record_type)
        self.fieldnames = [fd.name for fd in self.fields]
        self._f = f
        self._csv = csv.writer(f, dialect=dialect, **fmtparams)
        self._formatters = [(fd, get_codec(fd.type, value_dialect)[1]) for fd in self.fields]
        self._rows = 0
        self.state = WriterState.HEADER_PENDING

    def _flush(self) -> None:
        flush = getattr(self._f, "flush", None)
        if flush is not None:
            flush()

    def _emit(self, cells: List[str]) -> Any:
        out = self._csv.writerow(cells)
        self._rows += 1
        self._flush()
        return out

    def writeheader(self) -> Any:
        """Write the header row unless it was already written."""
        if self.state is not WriterState.HEADER_PENDING:
            return None
        out = self._emit(self.fieldnames)
        self.state = WriterState.STREAMING
        logger.debug("Wrote header for %s: %s", _type_name(self.record_type), self.fieldnames)
        return out

    def writerow(self, record: Any) -> Any:
        if not isinstance(record, self.record_type):
            raise TypeError(
                f"Expected {_type_name(self.record_type)}, got {type(record).__name__}"
            )
        self.writeheader()
        cells = [
            _run_formatter(fmt, getattr(record, fd.attr), fd, row=self._rows + 1, col=j)
            for j, (fd, fmt) in enumerate(self._formatters)
        ]
        return self._emit(cells)

    def writerows(self, records: Iterable[Any]) -> None:
        """Write each record in order; the first failure stops and propagates."""
        for r in records:
            self.writerow(r)


def writer(
    f: Any,
    record_type: type,
    dialect: Union[str, csv.Dialect] = "excel",
    *,
    value_dialect: ValueDialect = DEFAULT,
    **fmtparams: Any,
) -> Writer:
    return Writer(f, record_type, dialect=dialect, value_dialect=value_dialect, **fmtparams)


# ----------------------------
# Sequences
# ----------------------------

def select(predicate: Callable[[T], bool], iterable: Iterable[T]) -> Iterator[T]:
    """Lazily yield the items of `iterable` for which `predicate` is true."""
    for item in iterable:
        if predicate(item):
            yield item


filter_records = select


__all__ = [
    "RecordCSVError",
    "ConfigurationError",
    "HeaderError",
    "FormatError",
    "UnsupportedTypeError",
    "ValueDialect",
    "DEFAULT",
    "CSVDecodable",
    "CSVEncodable",
    "FieldDescriptor",
    "column",
    "parse_field_tag",
    "resolve_fields",
    "get_codec",
    "decode_value",
    "encode_value",
    "parse_timestamp",
    "format_timestamp",
    "Reader",
    "ReaderState",
    "reader",
    "Writer",
    "WriterState",
    "writer",
    "select",
    "filter_records",
    "__version__",
]
