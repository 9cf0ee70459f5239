# xpmanager

`xpm` is a command-line tool that encrypts and decrypts files and whole
directories with Fernet keys, encrypts the password manager database file in
the user's data directory, and encodes or decodes strings.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Command line

Every command is reached through `xpm`. Each group has a long name and a
short alias, and so does each command in it. `xpm --version` prints the
version.

### Encryption manager (`encryption-manager`, `em`)

Encrypt a file. A new key is generated and printed unless `--key` is given,
in which case you are asked for one:

```
xpm encryption-manager encrypt-file notes.txt
xpm em enf notes.txt --key --delete
```

The encrypted file is written next to the original with an extra `.x`
extension (`notes.txt.x`). The content is encrypted in 64 KiB blocks, each
stored as a 4-byte big-endian length followed by its Fernet token. With
`--delete` the original file is overwritten with ones, random data twice and
zeros, and then removed.

Decrypt a file. The path must end in `.x`; you are asked for the key and the
output is the path without its last extension. `--xpmv1` reads the older
format, in which the whole file is a single Fernet token:

```
xpm em decrypt-file notes.txt.x
xpm em def notes.txt.x --delete
xpm em def old.txt.x --xpmv1
```

Encrypt or decrypt every file under a directory, recursively. Files are
spread over one thread per CPU unless `--no-threads` is given. Encrypting a
directory always asks you to type a six-digit confirmation code; decrypting
asks for it only with `--delete`. Files already ending in `.x` are skipped
when encrypting, and files not ending in `.x` are skipped when decrypting.
The key is printed at the end.

```
xpm em encrypt-dir ./important
xpm em end ./important --key --no-threads
xpm em decrypt-dir ./important --delete
xpm em ded ./important --xpmv1
```

Encode and decode strings. You are asked for the string and, with `--xpmv1`,
for a constant between 1000 and 9999:

```
xpm em encode              # hexadecimal: "xpm" -> "78 70 6D"
xpm em encode --bin        # binary:      "xpm" -> "1111000 1110000 1101101"
xpm em encode --hex-hash   # per-word sum of character codes, in hexadecimal
xpm em encode --xpmv1      # each code times the constant, "0x..." joined by "%$%"
xpm em decode              # hexadecimal (also with --hex)
xpm em decode --bin
xpm em decode --xpmv1
```

### Password manager database (`password-manager`, `pm`)

The database file lives in the user's data directory under
`XPManager/data/passwords.db`, or `passwords.db.x` when encrypted.

Encrypt it. A new key is generated and printed unless `--key` is given:

```
xpm password-manager encrypt
xpm pm en --key
```

Decrypt it again, after a confirmation code and the key:

```
xpm pm decrypt
xpm pm de
```

After every successful command `xpm` warns if the database is found stored
unencrypted.

## Python API

- `xpmanager.codec`: `encode_hex`, `decode_hex`, `encode_bin`, `decode_bin`,
  `hex_hash`, `encode_xpmv1`, `decode_xpmv1`.
- `xpmanager.crypto`: `generate_key`, `encrypt_file(path, key)` (returns the
  key; an empty key means a new one), `decrypt_file(path, key)`,
  `decrypt_xpmv1_file(path, key)`.
- `xpmanager.dircrypt`: `encrypt_dir`, `decrypt_dir`, `encrypt_files`,
  `decrypt_files`.
- `xpmanager.files`: `FileState`, `WipeType`, `get_file_state`,
  `make_encrypt_path`, `make_decrypt_path`, `wipe_file`, `wipe_delete`,
  `create_file`, `delete_file`, `dir_files_tree`, `copy`, `read_json`.
- `xpmanager.paths`: `data_dir`, `encrypted_db_path`, `decrypted_db_path`,
  `log_db_path`, `db_state`, `warning_encrypt_database`.
- `xpmanager.pm_database`: `PMDatabaseEncryption`, `encrypt_database`,
  `decrypt_database`.
- `xpmanager.cli`: `build_parser`, `main(argv=None)` (returns the exit code).

Failures raise `xpmanager.errors.XpmError`, whose `code` is an
`xpmanager.errors.ExitCode`; the message is also printed on standard error.

## Keys

Keys are standard Fernet keys: 44 URL-safe base64 characters. Store them
somewhere safe; data encrypted with a lost key cannot be recovered.

## Exit codes

On failure `xpm` exits with a fixed code, for example 50 for a missing file,
58 for an already encrypted database, 59 for a file that is not encrypted,
65 for a missing directory, 80 for an invalid key, 81 for broken encrypted
data or a wrong key, 89 for a missing password database, 95 for bad input,
96 for a missing command and 97 when a confirmation code does not match.

## What it does not do

The password database file can only be encrypted and decrypted as a whole:
there are no commands to generate, save, find, show, count, update or delete
passwords in it. There is no log of operations to show, search or clear, and
no backup or restore of the databases.