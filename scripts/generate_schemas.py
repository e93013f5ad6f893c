"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from jsworkspace.api import DiscoveryReport
from jsworkspace.kernel.package import PackageInfo, WorkspaceStructure


def generate_schemas():
    """Generate JSON schemas for the published models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    for filename, model in [
        ("package_info.schema.json", PackageInfo),
        ("workspace_structure.schema.json", WorkspaceStructure),
        ("discovery_report.schema.json", DiscoveryReport),
    ]:
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
