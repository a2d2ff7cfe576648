"""
Lead pipeline ordering.

Stages run New -> Contacted -> Qualified -> Won -> Lost. The dashboard nudges
a lead one stage at a time; PATCH can still set any stage directly.
"""
from junkcrm.models.lead import LeadStage

PIPELINE_STAGES = [
    LeadStage.new,
    LeadStage.contacted,
    LeadStage.qualified,
    LeadStage.won,
    LeadStage.lost,
]


class PipelineError(ValueError):
    """Raised when a move would leave the pipeline."""


def move_stage(stage: LeadStage, direction: int) -> LeadStage:
    """
    Return the stage one step forward (+1) or back (-1) from `stage`.

    Raises:
        PipelineError: If direction is not +/-1 or the move passes either end
    """
    if direction not in (1, -1):
        raise PipelineError("Direction must be 1 or -1")
    index = PIPELINE_STAGES.index(LeadStage(stage)) + direction
    if index < 0:
        raise PipelineError(f"Lead is already at the first stage ({PIPELINE_STAGES[0].value})")
    if index >= len(PIPELINE_STAGES):
        raise PipelineError(f"Lead is already at the last stage ({PIPELINE_STAGES[-1].value})")
    return PIPELINE_STAGES[index]
