from dedupcopy.core.models import HashAlgorithmName

HASH_ALIASES = {
    "xxh3": HashAlgorithmName.XXH3,
    "xxhash": HashAlgorithmName.XXH3,
    "sha256": HashAlgorithmName.SHA256,
}

HASH_CHOICES = list(HASH_ALIASES.keys())

HASH_HELP_TEXT = (
    "Content hash used to detect duplicates:\n"
    "  xxh3, xxhash : xxHash3-128 (fast, default)\n"
    "  sha256       : SHA-256 (cryptographic, slower)\n"
)

EPILOG_TEXT = """
Examples:
  Copy one file per distinct content from ~/Photos to /mnt/backup/photos
  %(prog)s --in ~/Photos --out /mnt/backup/photos

  Same as above, showing what happens to every file
  %(prog)s --in ~/Photos --out /mnt/backup/photos -v

  Use SHA-256 and 1MB read chunks
  %(prog)s --in ~/Photos --out /mnt/backup/photos --hash sha256 --chunk-size 1M

Exit status is 1 on error and when nothing was copied.
"""
