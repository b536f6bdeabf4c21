from hashlib import sha256
from itertools import count
from srp6a.groups import Group

class PRG:
    # this returns a callable which, when invoked with an integer N, will
    # return N pseudorandom bytes derived from the seed
    def __init__(self, seed):
        self.generator = self.block_generator(seed)

    def __call__(self, numbytes):
        return b"".join([next(self.generator) for i in range(numbytes)])

    def block_generator(self, seed):
        assert isinstance(seed, type(b""))
        for counter in count():
            cseed = b"".join([b"prng-",
                              str(counter).encode("ascii"),
                              b"-",
                              seed])
            block = sha256(cseed).digest()
            for i in range(len(block)):
                yield block[i:i+1]

class ShortRead:
    # an entropy source that hands back fewer bytes than it was asked for
    def __init__(self, data):
        self.data = data

    def __call__(self, numbytes):
        return self.data[:numbytes]

def broken_entropy(numbytes):
    raise OSError("no entropy today")

# a toy safe prime (23 = 2*11+1) for checking the arithmetic by hand
G23 = Group(N=23, G=5, name="toy-23")
