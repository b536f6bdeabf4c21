import json
import unittest
from hashlib import sha256, sha1
from srp6a.errors import CredentialError
from srp6a.groups import Group2048
from srp6a.params import Params, SALT_SIZE
from srp6a.util import random_bytes, bytes_to_number
from srp6a.verifier import (Verifier, make_inner, make_x, create_verifier,
                            make_fake_salt)
from .common import PRG, G23

validU = "Chewbacca"
validP = "Falcon"

class MakeX(unittest.TestCase):
    def test_table(self):
        # (user, password, salt, inner fails, x fails); salt None is random
        for i, (user, pwd, salt, ierror, xerror) in enumerate([
            ("", "", None, True, True),
            ("i" * 500, "", None, True, True),
            ("i" * 500, validP, None, True, True),
            ("i" * 256, validP, None, True, True),
            ("i" * 255, validP, None, False, False),
            (validU, "", None, True, True),
            (validU, "p" * 500, None, True, True),
            (validU, "p" * 256, None, True, True),
            (validU, "p" * 255, None, False, False),
            (validU, validP, None, False, False),
            (validU, validP, random_bytes(10), False, True),
            (validU, validP, random_bytes(SALT_SIZE + 1), False, True),
            (validU, validP, random_bytes(SALT_SIZE), False, False),
            ]):
            if salt is None:
                salt = random_bytes(SALT_SIZE)
            try:
                inner = make_inner(user, pwd)
            except CredentialError:
                self.assertTrue(ierror, "%d: inner should not have failed" % i)
                continue
            self.assertFalse(ierror, "%d: inner should have failed" % i)
            if xerror:
                self.assertRaises(CredentialError, make_x, inner, salt)
            else:
                make_x(inner, salt)

    def test_encoding(self):
        # lone surrogates cannot be encoded, and bytes must be utf-8
        self.assertRaises(CredentialError, make_inner, "\ud800", validP)
        self.assertRaises(CredentialError, make_inner, validU, "\udfff")
        self.assertRaises(CredentialError, make_inner, b"\xff\xfe", validP)
        self.assertRaises(CredentialError, make_inner, validU, b"\xc3")
        self.assertRaises(CredentialError, make_inner, 42, validP)
        self.assertRaises(CredentialError, make_inner, validU, None)

    def test_lengths_are_bytes(self):
        # two bytes per character once encoded
        make_inner("é" * 127, validP)
        self.assertRaises(CredentialError, make_inner, "é" * 128, validP)

    def test_str_and_bytes_agree(self):
        self.assertEqual(make_inner(validU, validP),
                         make_inner(validU.encode("utf-8"),
                                    validP.encode("utf-8")))
        self.assertEqual(make_inner("andré", "pässwörd"),
                         make_inner("andré".encode("utf-8"),
                                    "pässwörd".encode("utf-8")))

    def test_formula(self):
        salt = b"\x01" * SALT_SIZE
        inner = make_inner("alice", "password123")
        self.assertEqual(inner, sha256(b"alice:password123").digest())
        expected = sha256(salt + sha256(b"alice:password123").digest()).digest()
        self.assertEqual(make_x(inner, salt), bytes_to_number(expected))

    def test_hash_f(self):
        params = Params(hash_f=sha1)
        inner = make_inner("alice", "password123", params)
        self.assertEqual(inner, sha1(b"alice:password123").digest())
        self.assertEqual(len(inner), 20)

    def test_salt_type(self):
        inner = make_inner(validU, validP)
        self.assertRaises(CredentialError, make_x, inner, "x" * SALT_SIZE)

class CreateVerifier(unittest.TestCase):
    def test_toy_group(self):
        salt = b"\x07" * SALT_SIZE
        v = create_verifier("alice", "password123", G23, salt=salt)
        x = make_x(make_inner("alice", "password123"), salt)
        self.assertEqual(v.hash, bytes([pow(5, x, 23)]))
        self.assertEqual(v.salt, salt)

    def test_random_salt(self):
        v1 = create_verifier(validU, validP, Group2048)
        v2 = create_verifier(validU, validP, Group2048)
        self.assertEqual(len(v1.salt), SALT_SIZE)
        self.assertNotEqual(v1.salt, v2.salt)
        self.assertNotEqual(v1.hash, v2.hash)
        self.assertEqual(len(v1.hash), len(Group2048))

    def test_entropy(self):
        v1 = create_verifier(validU, validP, Group2048, entropy_f=PRG(b"s"))
        v2 = create_verifier(validU, validP, Group2048, entropy_f=PRG(b"s"))
        self.assertEqual(v1, v2)
        self.assertEqual(v1.salt, PRG(b"s")(SALT_SIZE))

    def test_rejects_bad_credentials(self):
        self.assertRaises(CredentialError, create_verifier, "", validP, Group2048)
        self.assertRaises(CredentialError, create_verifier, validU, validP,
                          Group2048, salt=b"short")

    def test_dict(self):
        v = create_verifier(validU, validP, Group2048)
        d = json.loads(json.dumps(v.to_dict()))
        self.assertEqual(Verifier.from_dict(d), v)
        self.assertNotIn(validP, json.dumps(d))

class FakeSalt(unittest.TestCase):
    def test_stable(self):
        s1 = make_fake_salt(b"server secret", "nobody")
        s2 = make_fake_salt(b"server secret", "nobody")
        self.assertEqual(s1, s2)
        self.assertEqual(len(s1), SALT_SIZE)

    def test_varies(self):
        s = make_fake_salt(b"server secret", "nobody")
        self.assertNotEqual(s, make_fake_salt(b"server secret", "somebody"))
        self.assertNotEqual(s, make_fake_salt(b"other secret", "nobody"))

    def test_salt_size(self):
        params = Params(salt_size=24)
        self.assertEqual(len(make_fake_salt(b"k", "nobody", params)), 24)
