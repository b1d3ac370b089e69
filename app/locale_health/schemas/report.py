"""Serialization of scan results for the CLI and other report consumers.

Report keys are camelCase (``hasDups``, ``usedKeyPaths``, ...), the naming used
by Pulsar's JavaScript tooling. Key-path tallies are dumped verbatim: their
keys are dotted key paths, never field names, and must not be rewritten.
"""

from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields  # type: ignore[import-not-found]


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


class _ReportSchema(Schema):
    class Meta:
        ordered = True

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        if not getattr(field_obj, "data_key", None):
            field_obj.data_key = _camel_case(field_name)


def _tally() -> fields.Dict:
    return fields.Dict(keys=fields.String(), values=fields.Integer())


class PackageReportSchema(_ReportSchema):
    directory = fields.String(data_key="dir")
    has_dups = fields.Boolean()
    has_en_locale = fields.Boolean()
    errs = fields.List(fields.String())
    used_key_paths = _tally()
    total_key_paths = fields.Integer()


class ScanReportSchema(_ReportSchema):
    packages = fields.Dict(
        keys=fields.String(), values=fields.Nested(PackageReportSchema)
    )
    commons_key_maps_used = _tally()


__all__ = ["PackageReportSchema", "ScanReportSchema"]
