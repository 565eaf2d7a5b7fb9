#!/usr/bin/env python3
"""Export the Story API OpenAPI schema as JSON and YAML.

The schema is generated from create_app(), so no database is needed.
Export fails if any story route or the bearer scheme is missing.

Usage:
    python scripts/export_openapi.py [--out docs/api]
"""

import argparse
import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

DEFAULT_OUT = Path(__file__).parent.parent / "docs" / "api"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--out", type=Path, default=DEFAULT_OUT, help="output directory")
    args = parser.parse_args()

    try:
        import yaml
    except ImportError:
        print("PyYAML not installed. Run: pip install 'storyapi[docs]'")
        return 1

    from storyapi.api.config.openapi import missing_story_operations
    from storyapi.api.main import create_app

    schema = create_app().openapi()

    problems = missing_story_operations(schema)
    if problems:
        print("Schema incomplete, missing: " + ", ".join(problems))
        return 1

    args.out.mkdir(parents=True, exist_ok=True)
    (args.out / "openapi.json").write_text(json.dumps(schema, indent=2, ensure_ascii=False))
    (args.out / "openapi.yaml").write_text(
        yaml.dump(schema, default_flow_style=False, sort_keys=False, allow_unicode=True)
    )
    print(f"Wrote {len(schema['paths'])} paths to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
