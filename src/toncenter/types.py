import re
import typing
from dataclasses import dataclass
from typing import ClassVar, Self, override

import pydantic
from pydantic_core import core_schema

from .errors import InvalidFormat

_WORKCHAIN_RE = re.compile(r"-?[0-9]+")
_HASH_RE = re.compile(r"[0-9a-fA-F]{64}")
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

type Int8 = typing.Annotated[int, pydantic.Field(ge=-(1 << 7), lt=1 << 7)]
type Int32 = typing.Annotated[int, pydantic.Field(ge=-(1 << 31), lt=1 << 31)]
type Int64 = typing.Annotated[int, pydantic.Field(ge=-(1 << 63), lt=1 << 63)]
type Uint8 = typing.Annotated[int, pydantic.Field(ge=0, lt=1 << 8)]
type Uint16 = typing.Annotated[int, pydantic.Field(ge=0, lt=1 << 16)]
type Uint32 = typing.Annotated[int, pydantic.Field(ge=0, lt=1 << 32)]
type Uint64 = typing.Annotated[int, pydantic.Field(ge=0, lt=1 << 64)]


def _string_schema[T](
    parse: typing.Callable[[str], T], cls: type[T]
) -> core_schema.CoreSchema:
    def validate(value: object) -> T:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidFormat(f"expected string, got {type(value).__name__}")
        return parse(value)

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.to_string_ser_schema(),
    )


def _parse_decimal(value: str) -> int:
    if not _DECIMAL_RE.fullmatch(value):
        raise InvalidFormat(f"invalid decimal number: {value!r}")
    try:
        return int(value)
    except ValueError as e:
        # int() refuses strings longer than sys.get_int_max_str_digits()
        raise InvalidFormat(f"decimal number too long: {len(value)} digits") from e


def _validate_big_int(value: object) -> int:
    if isinstance(value, bool):
        raise InvalidFormat("expected decimal string, got bool")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise InvalidFormat(f"expected decimal string, got {type(value).__name__}")
    return _parse_decimal(value)


# Arbitrary precision integer carried as a decimal string on the wire.
type BigInt = typing.Annotated[
    int,
    pydantic.PlainValidator(_validate_big_int),
    pydantic.PlainSerializer(str, return_type=str),
]


def _empty_to_none(value: object) -> object:
    if value == "":
        return None
    return value


@dataclass(frozen=True)
class Address:
    """
    Standard account address in ``workchain:hex`` form.

    The hex part is kept exactly as received, so formatting a parsed address
    gives back the original string.
    """

    workchain: int
    address: str

    @classmethod
    def parse(cls, value: str) -> Self:
        parts = value.split(":")
        if len(parts) != 2:
            raise InvalidFormat(f"invalid address format: {value!r}")
        workchain, address = parts
        if not _WORKCHAIN_RE.fullmatch(workchain):
            raise InvalidFormat(f"invalid workchain in address: {value!r}")
        wc = int(workchain)
        if not -(1 << 31) <= wc < 1 << 31:
            raise InvalidFormat(f"workchain out of range in address: {value!r}")
        return cls(wc, address)

    def format(self) -> str:
        return f"{self.workchain}:{self.address}"

    @override
    def __str__(self) -> str:
        return self.format()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _string_schema(cls.parse, cls)


# Optional address that also treats "" as absent, as external messages have no source.
type OptionalAddress = typing.Annotated[Address | None, pydantic.BeforeValidator(_empty_to_none)]


@dataclass(frozen=True)
class HashBytes:
    """256-bit hash as 64 hex characters."""

    ZERO: ClassVar["HashBytes"]

    value: str

    def __post_init__(self):
        if not _HASH_RE.fullmatch(self.value):
            raise InvalidFormat(f"invalid hash: {self.value!r}")

    @override
    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _string_schema(cls, cls)


HashBytes.ZERO = HashBytes("0" * 64)


@dataclass(frozen=True, order=True)
class Tokens:
    """
    Token amount in nanotons.

    Amounts travel as decimal strings so no precision is lost. Subtraction
    saturates at zero instead of going negative.
    """

    ZERO: ClassVar["Tokens"]

    value: int

    @classmethod
    def parse(cls, value: str) -> Self:
        return cls(_parse_decimal(value))

    def saturating_add(self, other: "Tokens") -> "Tokens":
        return Tokens(self.value + other.value)

    def saturating_sub(self, other: "Tokens") -> "Tokens":
        result = self.value - other.value
        if result < 0:
            return Tokens.ZERO
        return Tokens(result)

    @override
    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: typing.Any, handler: pydantic.GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return _string_schema(cls.parse, cls)


Tokens.ZERO = Tokens(0)


class _Value(pydantic.BaseModel):
    model_config: typing.ClassVar[pydantic.ConfigDict] = pydantic.ConfigDict(frozen=True)


class BlockIdShort(_Value):
    workchain: Int32
    shard: Int64
    seqno: Uint32


class BlockId(_Value):
    workchain: Int32
    shard: Int64
    seqno: Uint32
    root_hash: HashBytes
    file_hash: HashBytes

    def as_short(self) -> BlockIdShort:
        return BlockIdShort(workchain=self.workchain, shard=self.shard, seqno=self.seqno)


class ShardIdent(_Value):
    MASTERCHAIN: ClassVar["ShardIdent"]

    workchain: Int32
    prefix: Int64

    @property
    def is_masterchain(self) -> bool:
        return self == ShardIdent.MASTERCHAIN


ShardIdent.MASTERCHAIN = ShardIdent(workchain=-1, prefix=-(1 << 63))
