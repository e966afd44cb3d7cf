#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from typing import List, Optional

from price_analytics.config.loader import ConfigLoader
from price_analytics.config.validation import ConfigValidator, ValidationError


def validate_category_config(loader: ConfigLoader, category_id: Optional[str]) -> List[ValidationError]:
    """Validate configuration for a specific category."""
    config = loader.merge_config(category_id)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("Validating price analytics configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    for category_id in loader.list_categories() + [None]:
        label = category_id or "defaults"
        errors = validate_category_config(loader, category_id)

        if errors:
            print(f"[FAIL] {label}: {len(errors)} validation errors")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"[ OK ] {label}")

    sys.exit(0 if all_valid else 1)


if __name__ == "__main__":
    main()
