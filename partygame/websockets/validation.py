"""Lightweight websocket payload validation utilities.

Minimal schema-like checking with clear, consistent error responses.

Schema Mini-Language (Python dict):
{
  'field_name': ('type', required: bool, extras: dict)
}
Supported types: 'str', 'int'
Extras: max_len, min_len (str)

Example:
 ok, data_or_err = validate({'room': 'lobby-1'}, CREATE_ROOM)

If invalid: (False, {'field': 'room', 'error': 'too long', 'code': 'max_len'})
If valid: (True, normalized_data)
"""
from __future__ import annotations
from typing import Any, Dict, Tuple

PRIMITIVES = {
    'str': str,
    'int': int,
}


def _fail(field: str, message: str, code: str) -> Tuple[bool, Dict[str, Any]]:
    return False, {'field': field, 'error': message, 'code': code}


def validate(payload: Any, schema: Dict[str, tuple]) -> Tuple[bool, Dict[str, Any]]:
    if not isinstance(payload, dict):
        return _fail('__root__', 'payload must be an object', 'type')
    out = {}
    for name, spec in schema.items():
        type_name, required = spec[0], spec[1]
        extras = spec[2] if len(spec) > 2 else {}
        if type_name not in PRIMITIVES:
            return _fail('__schema__', f'unsupported type {type_name}', 'schema')
        if name not in payload or payload[name] is None:
            if required:
                return _fail(name, 'missing required field', 'required')
            continue
        value = payload[name]
        # bool is an int subclass; never accept it as one
        if not isinstance(value, PRIMITIVES[type_name]) or isinstance(value, bool):
            return _fail(name, f'expected {type_name}', 'type')
        if type_name == 'str':
            s = value.strip()
            if not s:
                return _fail(name, 'must not be empty', 'empty')
            if 'max_len' in extras and len(s) > extras['max_len']:
                return _fail(name, 'too long', 'max_len')
            if 'min_len' in extras and len(s) < extras['min_len']:
                return _fail(name, 'too short', 'min_len')
            out[name] = s
        else:
            out[name] = value
    return True, out


def error_payload(event: str, result: Dict[str, Any]) -> Dict[str, Any]:
    return {'message': f"Invalid {event}: {result['error']}", 'field': result['field'], 'code': result['code']}


# Predefined schemas used by handlers
ROOM_FIELD = ('str', True, {'min_len': 1, 'max_len': 64})

CREATE_ROOM = {
    'room': ROOM_FIELD,
    'size': ('str', False, {'max_len': 16}),
}
JOIN_GAME = {
    'room': ROOM_FIELD,
}
LEAVE_GAME = JOIN_GAME
