"""Classify DTOs."""

from ecosort.application.classify.dto.pipeline_run import PipelineRun
from ecosort.application.classify.dto.upload_outcome import UploadOutcome

__all__ = ["PipelineRun", "UploadOutcome"]
