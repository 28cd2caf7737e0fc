"""MD5 message digest (RFC 1321).

This module provides a small, readable implementation of MD5. The message is
padded to a multiple of 64 bytes, every 64-byte chunk is decoded into sixteen
little-endian words and run through the 64-step compression function, and the
result of each chunk is added into the running state. The final state words
are serialized little-endian to form the 16-byte digest.

Each MD5 instance owns its own state; the tables below are read-only.
"""

MASK32 = 0xffffffff
MASK64 = 0xffffffffffffffff

# Sine-derived constants, K[i] = floor(2^32 * |sin(i + 1)|)
K = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

# Per-step left-rotation amounts, one 4-cycle per 16-step round
S = (
    (7, 12, 17, 22) * 4 +
    (5, 9, 14, 20) * 4 +
    (4, 11, 16, 23) * 4 +
    (6, 10, 15, 21) * 4
)

IV = (0x67452301, 0xefcdab89, 0x98badcfe, 0x10325476)

CHUNK_SIZE = 64


class MD5:

    def __init__(self):
        """Initialize to the MD5 initial vector (IV)."""
        self.reset()

    def reset(self):
        self.a, self.b, self.c, self.d = IV

    @staticmethod
    def pad(message):
        """Return message padded to a multiple of 64 bytes per MD5.

        Padding: 0x80 byte, then 0x00 bytes up to 56 mod 64, then the
        64-bit little-endian length (in bits). Lengths past 2^64 bits wrap.
        """
        num_bits = (len(message) * 8) & MASK64
        zeros = (CHUNK_SIZE - 9 - len(message)) % CHUNK_SIZE
        return bytes(message) + b"\x80" + zeros * b"\x00" + num_bits.to_bytes(8, 'little')

    @staticmethod
    def get_chunk(padded, offset):
        """Decode the 64 bytes at offset into sixteen little-endian 32-bit words."""
        assert offset % CHUNK_SIZE == 0
        assert 0 <= offset and offset + CHUNK_SIZE <= len(padded)
        return [int.from_bytes(padded[offset + 4*j:offset + 4*j + 4], 'little')
                for j in range(16)]

    @staticmethod
    def rotate_left(x, n):
        """Rotate x left by n bits, modulo 2^32."""
        x = x & MASK32
        return ((x << n) | (x >> (32 - n))) & MASK32

    @staticmethod
    def F(b, c, d, i):
        """MD5 non-linear boolean function selected by step index i.

        Round 0 (i < 16): (b & c) | (~b & d)
        Round 1 (i < 32): (d & b) | (~d & c)
        Round 2 (i < 48): b ^ c ^ d
        Round 3 (i < 64): c ^ (b | ~d)
        """
        if i < 16:
            f = (b & c) | (~b & d)
        elif i < 32:
            f = (d & b) | (~d & c)
        elif i < 48:
            f = b ^ c ^ d
        elif i < 64:
            f = c ^ (b | ~d)
        else:
            raise ValueError("Invalid step index: {}".format(i))
        return f & MASK32

    @staticmethod
    def message_index(i):
        """Return which chunk word feeds step i.

        - Round 0: i
        - Round 1: (5i + 1) mod 16
        - Round 2: (3i + 5) mod 16
        - Round 3: 7i mod 16
        """
        if i < 16:
            return i
        elif i < 32:
            return (5*i + 1) % 16
        elif i < 48:
            return (3*i + 5) % 16
        return (7*i) % 16

    @staticmethod
    def process_chunk(chunk, a, b, c, d):
        """Run the 64 compression steps over one chunk starting from (a, b, c, d).

        The returned words are not the new state: the caller adds them to
        the state it passed in.
        """
        assert len(chunk) == 16
        for i in range(64):
            f = MD5.F(b, c, d, i)
            comb = (f + a + chunk[MD5.message_index(i)] + K[i]) & MASK32
            new_b = (MD5.rotate_left(comb, S[i]) + b) & MASK32
            a, b, c, d = d, new_b, b, c
        return a, b, c, d

    def update_chunk(self, chunk):
        """Compress one decoded chunk and add the result into the running state."""
        a, b, c, d = MD5.process_chunk(chunk, self.a, self.b, self.c, self.d)
        self.a = (self.a + a) & MASK32
        self.b = (self.b + b) & MASK32
        self.c = (self.c + c) & MASK32
        self.d = (self.d + d) & MASK32

    def serialize_state(self):
        """Return a, b, c, d as 16 bytes, each word least-significant byte first."""
        return self.a.to_bytes(4, 'little') + \
            self.b.to_bytes(4, 'little') + \
            self.c.to_bytes(4, 'little') + \
            self.d.to_bytes(4, 'little')

    def digest(self, message):
        """Compute the 16-byte MD5 digest of message.

        The instance is reset to the IV first, so the result depends only
        on message.
        """
        self.reset()
        padded = MD5.pad(message)
        for offset in range(0, len(padded), CHUNK_SIZE):
            self.update_chunk(MD5.get_chunk(padded, offset))
        return self.serialize_state()

    def hexdigest(self, message):
        return self.digest(message).hex()


def _as_bytes(message):
    if isinstance(message, str):
        return message.encode('utf-8')
    return memoryview(message).tobytes()


def md5_digest(message):
    """Return the MD5 digest of message (bytes, bytearray or UTF-8 str)."""
    return MD5().digest(_as_bytes(message))


def md5_hexdigest(message):
    """Return the MD5 digest of message as 32 lowercase hex characters."""
    return MD5().hexdigest(_as_bytes(message))
