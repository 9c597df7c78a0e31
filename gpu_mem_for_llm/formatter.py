"""
Human- and machine-readable rendering of byte counts.
"""

import json

MEGABYTE = 1_000_000
GIGABYTE = 1_000_000_000


def format_memory(num_bytes: int) -> str:
    """
    Format a byte count as "<n> MB" or "<x.xx> GB".

    Values of at least one gigabyte are shown in GB to two decimal places.
    Smaller values are shown as whole megabytes, truncated, so anything
    under 1 MB prints as "0 MB".
    """
    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")

    if num_bytes >= GIGABYTE:
        return f"{num_bytes / GIGABYTE:.2f} GB"
    return f"{int(num_bytes) // MEGABYTE} MB"


def render_text(num_bytes: int) -> str:
    return f"Estimated memory required: {format_memory(num_bytes)}"


def render_json(num_bytes: int) -> str:
    return json.dumps({"mem_size": format_memory(num_bytes)}, separators=(",", ":"))


def render(num_bytes: int, json_output: bool = False) -> str:
    """Render the single output line for an estimate."""
    if json_output:
        return render_json(num_bytes)
    return render_text(num_bytes)
