"""
The `crypt` package provides the password utilities used when users are
written to the store.

Contents
--------
- encrypt_decrypt
    Utility module exposing the `EncryptionDec` class:
        * `hash_password` — hashes plaintext passwords using bcrypt
"""
