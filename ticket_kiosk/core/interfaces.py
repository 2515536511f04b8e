"""
Interfaces (Protocols) for the ticket kiosk.

Defines contracts for the display surface using Python's Protocol
for structural subtyping (duck typing with type hints).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ticket_kiosk.core.value_objects import Report


# =============================================================================
# Display Interface
# =============================================================================


@runtime_checkable
class DisplaySurface(Protocol):
    """
    Protocol for display surfaces.

    A display surface is a passive renderer: each report replaces the
    previous one in full and no history is kept.
    """

    async def render(self, report: Report) -> None:
        """
        Render a report.

        Args:
            report: The report to show.
        """
        ...
