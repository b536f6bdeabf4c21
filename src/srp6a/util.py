import os, binascii, math

def size_bits(maxval):
    return maxval.bit_length() or 1

def size_bytes(maxval):
    return int(math.ceil(size_bits(maxval) / 8))

def number_to_bytes(num, maxval):
    if num > maxval:
        raise ValueError
    num_bytes = size_bytes(maxval)
    fmt_str = "%0" + str(2*num_bytes) + "x"
    s_hex = fmt_str % num
    s = binascii.unhexlify(s_hex.encode("ascii"))
    assert len(s) == num_bytes
    return s

def bytes_to_number(s):
    if not isinstance(s, bytes):
        raise TypeError
    if not s:
        return 0
    return int(binascii.hexlify(s), 16)

def minimal_bytes(num):
    # big-endian with no leading zeros, b"" for zero
    if num == 0:
        return b""
    return number_to_bytes(num, num)

def pad(s, width):
    """Left-pad 's' with zero bytes so it is exactly 'width' bytes long.

    Asking for a width smaller than the input is a programming error (the
    caller let a value escape its modulus), so it raises ValueError rather
    than one of the protocol errors.
    """
    if not isinstance(s, bytes):
        raise TypeError
    if len(s) > width:
        raise ValueError("pad() given %d bytes for a %d-byte field"
                         % (len(s), width))
    return b"\x00" * (width - len(s)) + s

MAX_RANDOM_BYTES = 1000

def random_bytes(length, entropy_f=os.urandom):
    """Return exactly 'length' bytes from entropy_f, or blow up.

    entropy_f behaves like os.urandom, which is the default. Anything it
    raises is passed through untouched: a broken entropy source must never
    be papered over.
    """
    if length <= 0 or length >= MAX_RANDOM_BYTES:
        raise ValueError("random_bytes() with length %r" % (length,))
    data = entropy_f(length)
    if not isinstance(data, bytes) or len(data) != length:
        got = len(data) if isinstance(data, bytes) else data
        raise RuntimeError("entropy source gave %r of %d bytes" % (got, length))
    return data

def hash_chunks(hash_f, *chunks):
    h = hash_f()
    for chunk in chunks:
        h.update(chunk)
    return h.digest()
