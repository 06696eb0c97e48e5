"""Timeline body state machine: steps with details and per-step tips/notes"""

from blockmark.core.models import ItineraryStep


ITEM_PREFIX = '- '
SECTION_MARKERS = {
    '[tips]':   ('tips', True),
    '[/tips]':  ('tips', False),
    '[notes]':  ('notes', True),
    '[/notes]': ('notes', False),
}


def strip_item(line: str) -> str:
    """Drop a leading '- ' list prefix from an already-trimmed line."""
    return line[len(ITEM_PREFIX):].strip() if line.startswith(ITEM_PREFIX) else line


class _StepBuilder:
    """Accumulates lines for the step currently open (the InStep state)."""

    def __init__(self, step_id: str, title: str = ''):
        self.step = ItineraryStep(id=step_id, title=title)
        self.section: str | None = None     # 'tips' | 'notes' while a sub-section is open

    def toggle(self, section: str, opening: bool) -> None:
        if opening:
            if getattr(self.step, section) is None:
                setattr(self.step, section, [])
            self.section = section
        elif self.section == section:
            self.section = None

    def add(self, line: str) -> None:
        target = self.step.details if self.section is None else getattr(self.step, self.section)
        target.append(strip_item(line))


def parse_steps(lines: list[str]) -> list[ItineraryStep]:
    """Parse timeline body lines into steps.

    A blank line ends the open step. Outside a step, any other non-marker line
    starts a new step and becomes its title verbatim; a sub-section marker seen
    outside a step opens an untitled one. Inside a step, '- ' items and plain
    lines alike go to details or to the open tips/notes sub-section.
    """
    steps: list[ItineraryStep] = []
    current: _StepBuilder | None = None

    def _next_id() -> str:
        return f"step-{len(steps) + 1}"

    for raw in lines:
        line = raw.strip()
        if not line:
            if current is not None:
                steps.append(current.step)
                current = None
            continue

        marker = SECTION_MARKERS.get(line.lower())
        if marker is not None:
            section, opening = marker
            if current is None:
                if not opening:
                    continue
                current = _StepBuilder(_next_id())
            current.toggle(section, opening)
        elif current is None:
            current = _StepBuilder(_next_id(), title=line)
        else:
            current.add(line)

    if current is not None:
        steps.append(current.step)
    return steps
