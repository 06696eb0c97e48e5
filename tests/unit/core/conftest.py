"""Shared fixtures for core unit tests"""

import pytest

from blockmark.core.models import (
    GalleryImage,
    ImageBlock,
    ImageGalleryBlock,
    ItineraryStep,
    NotesBlock,
    TableBlock,
    TextBlock,
    TimelineBlock,
    TipsBlock,
)


TIMELINE_MD = """\
:::timeline [title="Day 1"]
Dhaka to Sylhet
- Train: 395 Taka
[tips]
- Book early
[/tips]

Sylhet to Mazar
CNG auto
[notes]
- Crowded at noon
[/notes]
:::"""


@pytest.fixture(name="timeline_md")
def timeline_md_fixture():
    return TIMELINE_MD


@pytest.fixture(name="all_blocks")
def all_blocks_fixture():
    """One block of every kind, ids positional as the parser assigns them."""
    return [
        TextBlock(id="text-0", content="Hello **world**\n\nSecond paragraph.", heading="Intro"),
        TipsBlock(id="tips-1", title="Packing", tips=["Sunscreen", "Water"]),
        NotesBlock(id="notes-2", notes=["Closed on Fridays"]),
        TimelineBlock(id="timeline-3", title="Day 1", steps=[
            ItineraryStep(id="step-1", title="Dhaka to Sylhet", details=["Train: 395 Taka"], tips=["Book early"]),
            ItineraryStep(id="step-2", title="Sylhet to Mazar", notes=["Crowded"]),
            ItineraryStep(id="step-3", title="Rest"),
        ]),
        ImageBlock(id="image-4", url="https://example.com/a.jpg", caption="Tea garden", alt="Green hills"),
        ImageGalleryBlock(id="gallery-5", title="Highlights", images=[
            GalleryImage(url="https://example.com/1.jpg", caption="One"),
            GalleryImage(url="https://example.com/2.jpg", alt="Two"),
        ]),
        TableBlock(id="table-6", title="Budget", caption="BDT", headers=["Item", "Cost"],
                   rows=[["Food", "800"], ["Hotel", "1500"]]),
    ]
