"""Prompt text for the chiller-plant assistant."""

from pydantic import BaseModel, Field


class PlantReadings(BaseModel):
    """The live readings quoted to the model in the system instruction."""

    compressor_power_kw: float = Field(description="Compressor unit electrical power in kW.")
    cop: float = Field(description="Current coefficient of performance.")


# Readings used when no telemetry feed is attached
DEFAULT_READINGS = PlantReadings(compressor_power_kw=245.5, cop=4.2)

_SYSTEM_TEMPLATE = """\
You are a professional AI operator for an industrial chilled-water plant.
Current parameters: compressor power {power}kW, COP {cop}.
Answer in Markdown, following these rules:
  1. Units, scientific notation and temperature symbols must be wrapped in $ signs, e.g. $7.0^\\circ\\text{{C}}$.
  2. When naming a specific piece of equipment (e.g. **chilled water supply temperature**), decide from context whether it should be bold.
  3. Never use Markdown inside chart or table keys; data labels must stay plain.
"""


def build_system_instruction(readings: PlantReadings = DEFAULT_READINGS) -> str:
    """Fill the assistant persona with the current plant readings."""
    return _SYSTEM_TEMPLATE.format(power=readings.compressor_power_kw, cop=readings.cop)


# First assistant message of every conversation; exercises every markup feature
GREETING = (
    "Hello! I am your plant control assistant. The chilled water supply temperature is fluctuating slightly.\n"
    "\n"
    "## Current operating overview\n"
    "Supply temperature set point is $7.0^\\circ\\text{C}$, actual supply temperature is $7.2^\\circ\\text{C}$.\n"
    "\n"
    "| Key metric | Reading | Status |\n"
    "|---|---|---|\n"
    "| Supply temperature | $7.2^\\circ\\text{C}$ | Watch |\n"
    "| Ambient wet-bulb temperature | $24.5^\\circ\\text{C}$ | Good |\n"
    "\n"
    "### AI insight\n"
    "- Increase the monitoring frequency of **chilled water supply temperature** so that the "
    "fluctuation stays within $\\pm 0.1^\\circ\\text{C}$."
)
