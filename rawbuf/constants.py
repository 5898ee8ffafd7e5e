# SPDX-License-Identifier: GPL-3.0-or-later OR LicenseRef-Commercial
"""Limits and defaults shared across the package."""

MAX_LENGTH = 2_147_483_647
MAX_STRING_LENGTH = 536_870_888

# Bytes shown by Buffer.__repr__ before eliding the rest.
INSPECT_MAX_BYTES = 50

DEFAULT_ENCODING = "utf8"

constants = {
    "MAX_LENGTH": MAX_LENGTH,
    "MAX_STRING_LENGTH": MAX_STRING_LENGTH,
}
