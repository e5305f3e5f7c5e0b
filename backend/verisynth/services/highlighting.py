"""
Highlight segmentation for the analysis transcript.

Splits the original text into plain and claim segments so the UI can render
claims inline, colored by status. Claims are visited in offset order; text
between them becomes plain segments.

Overlapping claims: a claim that starts inside an already highlighted range
is not rendered inline (it is still listed in the result). No character is
ever emitted twice, so joining all segment texts gives back the input.
"""

from verisynth.models.schemas import Claim, HighlightSegment


def build_highlight_segments(text: str, claims: list[Claim]) -> list[HighlightSegment]:
    segments = []
    last_index = 0

    for claim in sorted(claims, key=lambda c: c.start_index):
        if claim.start_index < last_index:
            continue

        if claim.start_index > last_index:
            segments.append(
                HighlightSegment(
                    text=text[last_index:claim.start_index],
                    start_index=last_index,
                    end_index=claim.start_index,
                )
            )

        segments.append(
            HighlightSegment(
                text=text[claim.start_index:claim.end_index],
                start_index=claim.start_index,
                end_index=claim.end_index,
                claim_id=claim.id,
                status=claim.status,
            )
        )
        last_index = claim.end_index

    if last_index < len(text):
        segments.append(
            HighlightSegment(
                text=text[last_index:],
                start_index=last_index,
                end_index=len(text),
            )
        )

    return segments
