"""
Staged progress display.

Reveals a fixed sequence of named steps, each after a delay. Purely
cosmetic: callers compute their result first and the delay can be zero.
"""

import asyncio
from typing import Callable, List, Optional, Sequence

ProgressCallback = Callable[[int, str], None]

REGISTRATION_STAGES = (
    "Reading serial number...",
    "Extracting receipt data...",
    "Matching warranty information...",
    "Verifying match...",
)

CLAIM_ANALYSIS_STAGES = (
    "Reading warranty terms for {brand}...",
    "Analysing your issue description...",
    "Checking coverage clauses...",
    "Reviewing exclusions...",
    "Generating recommendation...",
)


async def run_stages(
    labels: Sequence[str],
    delay_seconds: float = 0.0,
    progress: Optional[ProgressCallback] = None
) -> List[str]:
    """Reveal each stage in order and return the labels shown."""
    shown = []
    for index, label in enumerate(labels):
        if delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        if progress is not None:
            progress(index, label)
        shown.append(label)
    return shown
