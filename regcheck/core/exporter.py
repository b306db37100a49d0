"""Export utilities for check reports."""

from pathlib import Path

from regcheck.models.result import CheckReport


def to_json(report: CheckReport, indent: int = 2) -> str:
    """
    Convert CheckReport to JSON string.

    Args:
        report: CheckReport to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return report.model_dump_json(indent=indent)


def to_dict(report: CheckReport) -> dict:
    """Convert CheckReport to a JSON-compatible dictionary."""
    return report.model_dump(mode="json")


def save_json(
    report: CheckReport,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save CheckReport to JSON file.

    Args:
        report: CheckReport to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(report, indent=indent), encoding="utf-8")
    return path
