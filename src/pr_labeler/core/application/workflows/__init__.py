from pr_labeler.core.application.workflows.base_workflow import BaseWorkflow
from pr_labeler.core.application.workflows.pr_labeling_workflow import LabelingReport, PrLabelingWorkflow

__all__ = ["BaseWorkflow", "LabelingReport", "PrLabelingWorkflow"]
