# exporters.py
import json
import math
from dataclasses import asdict

import numpy as np
import pandas as pd

from calculator import ScenarioInput, ScenarioOutput

def export_result(output: ScenarioOutput) -> tuple[str, bytes]:
    df = pd.DataFrame([asdict(output)])
    return "childcare_result.csv", df.to_csv(index=False).encode()

def _json_default(o):
    # Handle numpy arrays & scalars cleanly for JSON
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.float32, np.float64, np.int32, np.int64)):
        return o.item()
    # Let json raise for anything else unexpected
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")

def _json_safe(value):
    # NaN/inf are not valid JSON; write them as null
    if isinstance(value, (np.ndarray, np.generic)):
        value = value.tolist()
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value

def export_inputs(inp: ScenarioInput) -> tuple[str, bytes]:
    """
    Export the current form inputs to JSON so a scenario can be shared.
    """
    blob = json.dumps(_json_safe(asdict(inp)), indent=2, default=_json_default)
    return "childcare_inputs.json", blob.encode()
