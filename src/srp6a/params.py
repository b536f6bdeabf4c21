import hashlib

# The values below are fixed for one version of the protocol. Changing the
# hash function (or the salt size) makes every stored verifier useless, so
# these are never per-call options: build a new Params and re-provision
# every credential with it instead.

SALT_SIZE = 16
RAND_SIZE = 32
MAX_CREDENTIAL_SIZE = 255

class Params:
    def __init__(self, hash_f=hashlib.sha256, salt_size=SALT_SIZE,
                 rand_size=RAND_SIZE, max_credential_size=MAX_CREDENTIAL_SIZE):
        self.hash_f = hash_f
        self.hash_name = hash_f().name
        self.salt_size = salt_size
        self.rand_size = rand_size
        self.max_credential_size = max_credential_size

    def fingerprint(self):
        # recorded in serialized state, so a restore with different params
        # fails loudly instead of producing a silently different key
        s = "%s:%d:%d:%d" % (self.hash_name, self.salt_size, self.rand_size,
                             self.max_credential_size)
        return hashlib.sha256(s.encode("ascii")).hexdigest()

DefaultParams = Params()
