"""
Analysis traces.

A trace records what the sentence analyzer did with a piece of text: the
tokens it found, the outcome for each token and the final statistics.
"""
import json
import uuid
from datetime import datetime, timezone


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class AnalysisTrace:
    """
    A single trace of one sentence analysis.
    """
    def __init__(self, text: str):
        self.trace_id = str(uuid.uuid4())
        self.start_time = _utc_now()
        self.end_time = None
        self.text = text
        self.steps = []
        self.result = None
        self.error = None

    def add_step(self, step_name: str, inputs: dict, outputs: dict, description: str = None):
        """
        Adds a step to the trace.

        Args:
            step_name: The component that ran (e.g., "Tokenizer", "WordAnalyzer").
            inputs: A dictionary of inputs to the step.
            outputs: A dictionary of outputs from the step.
            description: An optional natural language description of the step.
        """
        step = {
            "step_id": len(self.steps) + 1,
            "name": step_name,
            "timestamp": _utc_now(),
            "inputs": inputs,
            "outputs": outputs,
        }
        if description:
            step["description"] = description
        self.steps.append(step)

    def set_result(self, result: dict):
        """Sets the final result and concludes the trace."""
        self.result = result
        self.end_time = _utc_now()

    def set_error(self, error_message: str):
        """Records an error and concludes the trace."""
        self.error = error_message
        self.end_time = _utc_now()

    def to_dict(self) -> dict:
        return {
            "trace_id": self.trace_id,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "text": self.text,
            "steps": self.steps,
            "result": self.result,
            "error": self.error,
        }

    def to_json(self, indent=2):
        """Serializes the trace to a JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
