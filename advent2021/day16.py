"""Packet decoder for the BITS transmission format."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

_HEX_DIGITS = frozenset("0123456789ABCDEF")
_LITERAL = 4


@dataclass
class BitReader:
    """Sequential reader over a string of bits; reading past the end yields zeros."""

    bits: str
    consumed_bits: int = 0

    @classmethod
    def from_hex(cls, hex_text: str) -> BitReader:
        cleaned = hex_text.strip()
        for c in cleaned:
            if c not in _HEX_DIGITS:
                raise ValueError(f"invalid hexadecimal digit {c!r}")
        return cls("".join(f"{int(c, 16):04b}" for c in cleaned))

    def has_more(self) -> bool:
        return self.consumed_bits < len(self.bits)

    def read_int(self, bits: int) -> int:
        value = 0
        for _ in range(bits):
            bit = self.bits[self.consumed_bits] if self.has_more() else "0"
            value = (value << 1) | int(bit)
            self.consumed_bits += 1
        return value

    def drop_bits(self, bits: int) -> None:
        for _ in range(bits):
            if not self.has_more():
                break
            self.consumed_bits += 1

    def hex_align(self) -> None:
        """Skip to the start of the next hexadecimal digit."""
        offset = self.consumed_bits % 4
        if offset:
            self.drop_bits(4 - offset)


@dataclass
class Packet:
    version: int
    type_id: int
    literal: int | None = None
    subpackets: list[Packet] = field(default_factory=list)

    def version_sum(self) -> int:
        return self.version + sum(p.version_sum() for p in self.subpackets)

    def _pair(self) -> tuple[int, int]:
        if len(self.subpackets) < 2:
            raise ValueError(f"operator {self.type_id} needs two subpackets")
        return self.subpackets[0].eval(), self.subpackets[1].eval()

    def eval(self) -> int:
        if self.literal is not None:
            return self.literal
        values = (p.eval() for p in self.subpackets)
        match self.type_id:
            case 0:
                return sum(values)
            case 1:
                return math.prod(values)
            case 2:
                return min(values)
            case 3:
                return max(values)
            case 5:
                left, right = self._pair()
                return int(left > right)
            case 6:
                left, right = self._pair()
                return int(left < right)
            case 7:
                left, right = self._pair()
                return int(left == right)
        raise ValueError(f"unknown operator type {self.type_id}")


class PacketParser:
    """Iterates over the top-level packets of a transmission."""

    def __init__(self, reader: BitReader) -> None:
        self.reader = reader

    @classmethod
    def from_hex(cls, hex_text: str) -> PacketParser:
        return cls(BitReader.from_hex(hex_text))

    def _required_packet(self) -> Packet:
        packet = self.next_packet()
        if packet is None:
            raise ValueError("transmission ended inside an operator packet")
        return packet

    def next_packet(self) -> Packet | None:
        """Read one packet, or return None when no bits are left."""
        reader = self.reader
        if not reader.has_more():
            return None

        version = reader.read_int(3)
        type_id = reader.read_int(3)

        if type_id == _LITERAL:
            value = 0
            while True:
                is_last = reader.read_int(1) == 0
                value = (value << 4) | reader.read_int(4)
                if is_last:
                    break
            return Packet(version, type_id, literal=value)

        length_type = reader.read_int(1)
        length = reader.read_int(15 if length_type == 0 else 11)
        subpackets: list[Packet] = []
        if length_type == 0:
            start = reader.consumed_bits
            while reader.consumed_bits - start < length:
                subpackets.append(self._required_packet())
        else:
            subpackets.extend(self._required_packet() for _ in range(length))
        return Packet(version, type_id, subpackets=subpackets)

    def __iter__(self) -> PacketParser:
        return self

    def __next__(self) -> Packet:
        packet = self.next_packet()
        self.reader.hex_align()
        if packet is None:
            raise StopIteration
        return packet


def part1(text: str) -> int:
    return sum(p.version_sum() for p in PacketParser.from_hex(text))


def part2(text: str) -> int:
    packet = next(PacketParser.from_hex(text), None)
    if packet is None:
        raise ValueError("empty transmission")
    return packet.eval()