__all__ = [
    "EMPTY",
    "DEFAULT_DTYPE",
    "TIME_FIELD",
    "DEFAULT_LOG_CONF",
    "DEFAULT_SAMPLER_CONF",
]


EMPTY = float("nan")

DEFAULT_DTYPE = "float64"

TIME_FIELD = "time"

DEFAULT_LOG_CONF = {
    "fields": [
        (TIME_FIELD, "int64"),
        ("variable1", DEFAULT_DTYPE),
        ("variable2", DEFAULT_DTYPE),
    ],
    "derivation": {
        "target": "derived_sum",
        "function": "sum",
        "inputs": ["variable1", "variable2"],
    },
}

DEFAULT_SAMPLER_CONF = {
    "fields": ["variable1", "variable2"],
    "steps": 100,
    "mean": 0.0,
    "std": 1.0,
    "start": 1,
    "step": 1,
}
