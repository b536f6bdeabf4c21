#!/usr/bin/env python

import timeit
from setuptools import setup, Command

cmdclass = {}

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for group in ["Group2048", "Group3072", "Group4096"]:
            S1 = "from srp6a import Client, ServerInstance, MapLookup, %s" % group
            S2 = "db = MapLookup(); db.add('user', 'password', %s)" % group
            S3 = "s = ServerInstance(db); m = s.key_exchange('user')"
            S4 = "c = Client('user', 'password')"
            S5 = "key, A = c.key_exchange(m)"
            S6 = "s.key(A)"

            full = do([S1, S2], ";".join([S3, S4, S5, S6]))
            server = do([S1, S2], ";".join([S3]))
            client = do([S1, S2, S3], ";".join([S4, S5]))
            print("%-9s: full=%6s, server-challenge=%6s, client=%6s"
                  % (group, abbrev(full), abbrev(server), abbrev(client)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a (RFC 5054) password-authenticated key exchange (pure python)",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      )
