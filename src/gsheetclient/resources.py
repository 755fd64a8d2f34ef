from dataclasses import asdict, fields
from typing import Any, List

def prune(value: Any) -> Any:
    """
    Recursively drop None and empty dict/list entries from a dict tree.
    Scalars are kept even when falsy, 0 is a perfectly good row index, False a
    perfectly good flag and "" a perfectly good dropdown entry.
    """
    if isinstance(value, dict):
        out = {}
        for k, v in value.items():
            v = prune(v)
            if v is None or (isinstance(v, (dict, list)) and not v):
                continue
            out[k] = v
        return out
    if isinstance(value, list):
        return [prune(v) for v in value]
    return value

class SheetsResourceBase():
    """
    Intended to be subclassed by a dataclass but isnt actually a dataclass.
    Subclasses get dict translation for free, which is what the API client
    wants for request bodies.
    """
    @classmethod
    def from_base(cls, base: dict|None):
        """
        Build from a response dict, ignoring any keys this class does not
        model.  The API grows fields faster than we do.
        """
        names = [f.name for f in fields(cls)]
        return cls(**{k: v for k, v in dict(base or {}).items() if k in names})

    def to_base(self) -> dict:
        """
        Default just return the dict representation of the object.
        Call fixup() first to ensure all fields are in correct format.
        """
        self.fixup()
        return asdict(self)

    def trim(self) -> dict:
        """
        The dict representation with every unset field removed, at every level.
        Sheets treats a present field as 'set this', so partial updates
        must only carry what the caller filled in.
        """
        return prune(self.to_base())

    def fixup(self) -> None:
        """
        notify a subclass to do any field adjustments
        """
        pass

    def set_fields(self) -> List[str]:
        """Names of the top level fields that carry a value."""
        return list(self.trim().keys())

