"""Helpers shared by the ECIES tests."""


def remove_0x(hex_str: str) -> str:
    """Strip a leading 0x/0X."""
    if hex_str.startswith(("0x", "0X")):
        return hex_str[2:]
    return hex_str


def decode_hex(hex_str: str) -> bytes:
    """Hex string (optionally 0x-prefixed) to bytes."""
    return bytes.fromhex(remove_0x(hex_str))


class FixedRandomSource:
    """Random source replaying a fixed list of byte strings, then an incrementing counter."""

    def __init__(self, *chunks: bytes):
        self._chunks = list(chunks)
        self._counter = 0
        self.requests = []

    def token_bytes(self, n: int) -> bytes:
        self.requests.append(n)
        if self._chunks:
            chunk = self._chunks.pop(0)
            assert len(chunk) == n, f"requested {n} bytes, have {len(chunk)}"
            return chunk
        self._counter += 1
        return self._counter.to_bytes(n, byteorder='big')
