from typing import Dict


def flatten_errors(errors) -> Dict[str, str]:
    """``{'field': ['msg', ...]}`` -> ``{'field': 'msg'}``"""
    details = {}
    for field_name, messages in errors.items():
        if isinstance(messages, (list, tuple)) and messages:
            details[field_name] = str(messages[0])
        else:
            details[field_name] = str(messages)
    return details
