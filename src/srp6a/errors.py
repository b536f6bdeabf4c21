
class SRPError(Exception):
    pass

class CredentialError(SRPError):
    """The username, password or salt cannot be used to derive a verifier:
    bad text encoding, an empty or oversized field, or a wrong-sized salt."""

class UnknownGroupError(SRPError):
    """The server offered a group that this client does not trust."""

class MalformedMaterial(SRPError):
    """A public value or salt from the other side has the wrong length."""

class InvalidPublicValue(SRPError):
    """The other side's public value is 0 mod N. An honest peer never sends
    this, and accepting it would pin the shared key to a value an attacker
    can predict."""

class UnknownUser(SRPError):
    """The username is not known to the server.

    When the server was asked to disguise the miss, 'material' holds the
    decoy ServerMaterial, which can be sent to the client exactly as a real
    one would be."""
    def __init__(self, message="username provided is not known",
                 material=None):
        SRPError.__init__(self, message)
        self.material = material

class OnlyCallKeyExchangeOnce(SRPError):
    """key_exchange() may only be called once. Each exchange needs a fresh
    instance and a fresh ephemeral secret."""

class OnlyCallKeyOnce(SRPError):
    """key() may only be called once. Answering a second A with the same b
    gives an attacker more to work with."""

class KeyExchangeNotCalled(SRPError):
    """key() was called before key_exchange()."""

class SerializedTooEarly(SRPError):
    pass

class WrongParamsError(SRPError):
    pass
