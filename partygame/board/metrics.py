from typing import Dict


def init_metrics() -> Dict[str, int | float | bool | dict]:
    return {
        'attempts': 0,
        'backtracks': 0,
        'walk_steps': 0,
        'main_path_length': 0,
        'shortcuts': 0,
        'shortcut_cells': 0,
        'shortcut_attempts': 0,
        'fallback_used': False,
        'tiles': 0,
        'kind_counts': {},
        'runtime_ms': 0.0,
    }
