"""
Identifier derivation for re-exported modules
"""


def _is_ascii_alnum(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or ('0' <= char <= '9')


def derive_identifier(filename: str) -> str:
    """
    Derive the namespace identifier for a file or directory name

    The final extension is stripped, then every maximal run of ASCII
    letters and digits becomes one segment: first character uppercased,
    the rest lowercased. Everything else, non-ASCII letters included,
    separates segments and is dropped.

        my-file.ts         -> MyFile
        a.b.ts             -> AB
        XMLHttpRequest.ts  -> Xmlhttprequest
        .ts                -> ''

    Distinct names may derive the same identifier.
    """
    dot = filename.rfind('.')
    stem = filename[:dot] if dot != -1 else filename

    out = []
    capital = True
    for char in stem:
        if not _is_ascii_alnum(char):
            capital = True
            continue
        if capital:
            out.append(char.upper())
            capital = False
        else:
            out.append(char.lower())

    return ''.join(out)
