"""
Summary: HTML notices shown next to a package with a pending update.
Why: Keep the base update notice and the impact summary rendering in one place.
"""

from __future__ import annotations

from html import escape

from ..domain.models import ImpactReport, UpdateCandidate


def build_update_notice(name: str, new_version: str, details_url: str | None = None) -> str:
    """Render the base "new version available" paragraph."""

    version_link = f"View version {escape(new_version)} details"
    if details_url:
        label = escape(f"View {name} version {new_version} details", quote=True)
        version_link = (
            f'<a href="{escape(details_url, quote=True)}" '
            f'class="thickbox open-plugin-details-modal" aria-label="{label}">{version_link}</a>'
        )
    return (
        f"<p><strong>There is a new version of {escape(name)} available. "
        f"{version_link}.</strong></p>"
    )


def _format_percent(value: float) -> str:
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def decorate_notice(
    notice: str,
    report: ImpactReport | None,
    candidate: UpdateCandidate | None = None,
) -> str:
    """Append the impact summary to ``notice`` when ``report`` carries one.

    Failed, missing, or percentage-less reports leave ``notice`` unchanged so
    the base update notice always renders.
    """

    if report is None or not report.is_success or report.diff_percent is None:
        return notice

    summary = f"There is a difference of {_format_percent(report.diff_percent)}%"
    if candidate is not None:
        summary += (
            f" when updating to version {escape(candidate.available_version)}"
            f" from {escape(candidate.installed_version)}"
        )
    summary += "."
    if report.gallery_url:
        summary += (
            f' <a href="{escape(report.gallery_url, quote=True)}" target="_blank">'
            "View changes details</a>."
        )
    return f"{notice}<p><strong>{summary}</strong></p>"


__all__ = ["build_update_notice", "decorate_notice"]
