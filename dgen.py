'''
seeded test-data generation backed by faker and numpy, served as lazy sequences.

a schema is any python value:
  - a string naming a faker provider ('word', 'name') is replaced by a fake value
  - a (provider, kwargs) tuple calls the provider with kwargs
  - a dict containing '_gen_provider' is a special provider (ref, choice, integers, literal)
  - a plain dict is generated key by key, later keys can ref earlier ones
  - [item_schema] is a list; '_gen_count' in item_schema sets its size
  - anything else is returned as is
'''

import numpy as np
from faker import Faker
from lazyseq import LazySequence, iterator, sequence
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_gen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        elif provider == "choice":
            # numpy hands back numpy scalars, convert to native python types
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "integers":
            return int(self._rng.integers(config["low"], config["high"], endpoint=True))

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_gen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _gen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_gen_provider" in schema:
                return self._resolve_provider(schema, current_context)

            generated_obj = {}
            for k, v in schema.items():
                # refs can look up into the parent and sideways into earlier keys
                merged_context = {**current_context, **generated_obj}
                generated_obj[k] = self.create(v, merged_context)
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_gen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5
        if isinstance(item_schema, dict) and "_gen_count" in item_schema:
            count_config = item_schema["_gen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> LazySequence:
        """a finite sequence of `count` records, generated up front"""
        return iterator([self._generator.create(self._schema) for _ in range(count)])

    def records(self, count: int) -> List[Any]:
        """like take(), but as a plain list"""
        return [self._generator.create(self._schema) for _ in range(count)]

    def stream(self) -> LazySequence:
        """an infinite sequence, each pull generates a new record"""
        return sequence(lambda _: self._generator.create(self._schema))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
