from namesake.core.models import HashAlgorithmName

HASH_ALIASES = {
    "sha256": HashAlgorithmName.SHA256,
    "xxhash": HashAlgorithmName.XXHASH64,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Content digest used by -strict:\n"
    "  sha256     : SHA-256, cryptographic (default)\n"
    "  xxhash     : xxHash64, much faster, not cryptographic\n"
    "Example    : %(prog)s ~/Music /mnt/backup -strict --hash xxhash\n"
)

EPILOG_TEXT = """
Examples:
  Files sharing a name anywhere below the current directory
  %(prog)s

  Same filenames across two trees, newest copy first
  %(prog)s ~/Music /mnt/backup/Music

  Only byte-identical copies
  %(prog)s ~/Music /mnt/backup/Music -strict

  Plain list of paths appended to a report file (for scripts)
  %(prog)s ~/Music -strict -no-verbose -output ~/duplicates.txt
"""
