"""Marker sentinels delimiting spectr-managed content inside user files.

Markers are matched case-insensitively on read (older releases wrote
``<!-- spectr:START -->``) and always written in the lowercase form below.
"""

START_MARKER = "<!-- spectr:start -->"
END_MARKER = "<!-- spectr:end -->"

NEWLINE = "\n"
# Separates pre-existing content from an appended managed block.
BLOCK_SEPARATOR = "\n\n"
