'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from streamy import from_supplier, Stream
from typing import Any, Dict, Optional


class Generator:
    """turns a schema into one generated record per create() call."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            # instance seeding, so two generators with one seed never share state
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _call_faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]

        if provider == "choice":
            # numpy hands back numpy scalars; convert to plain python values
            picked = self._rng.choice(config["from"])
            return picked.item() if hasattr(picked, 'item') else picked

        if provider == "sequence":
            # a running counter, handy for stable ids
            config.setdefault("_next", config.get("start", 1))
            value = config["_next"]
            config["_next"] += 1
            return value

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_provider" in schema:
                return self._resolve_provider(schema, current_context)

            # fields are built in order, so later fields can reference earlier ones
            record = {}
            for key, field_schema in schema.items():
                record[key] = self.create(field_schema, {**current_context, **record})
            return record

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._call_faker(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._call_faker(schema[0], schema[1])

        return schema


def from_schema(schema: Any, seed: Optional[int] = None) -> Stream:
    """
    an unbounded stream of records built from schema.
    every iteration starts a new generator, so with a seed each pass yields the same records.
    combine with take() to bound it.
    """
    def record_cursor():
        generator = Generator(seed)
        # copy provider configs so counters restart on every pass
        local_schema = _fresh_copy(schema)
        while True:
            yield generator.create(local_schema)

    return from_supplier(record_cursor)


def _fresh_copy(schema: Any) -> Any:
    if isinstance(schema, dict):
        return {k: _fresh_copy(v) for k, v in schema.items()}
    return schema
