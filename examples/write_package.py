#!/usr/bin/env python3
"""
Example: write an AASX package and read it back.

Stores an AAS environment as the spec, a PDF as supplementary file and a
PNG thumbnail, then reopens the package and prints what it contains.
"""

import json
from pathlib import Path

from aasx_package import Packaging

SHELL_ID = "https://example.com/aas/example-aas"
SUBMODEL_ID = "https://example.com/submodel/technical-data"


def _external_reference(value):
    return {
        "type": "ExternalReference",
        "keys": [{"type": "GlobalReference", "value": value}],
    }


def _property(id_short, value, semantic_id):
    return {
        "modelType": "Property",
        "idShort": id_short,
        "valueType": "xs:string",
        "value": value,
        "semanticId": _external_reference(semantic_id),
    }


def create_environment():
    """Build a minimal AAS environment as JSON-serializable data."""
    shell = {
        "modelType": "AssetAdministrationShell",
        "id": SHELL_ID,
        "idShort": "ExampleAAS",
        "assetInformation": {
            "assetKind": "Instance",
            "globalAssetId": "https://example.com/asset/example-asset",
            "defaultThumbnail": {"path": "/thumbnail.png", "contentType": "image/png"},
        },
        "submodels": [{
            "type": "ModelReference",
            "keys": [{"type": "Submodel", "value": SUBMODEL_ID}],
        }],
    }
    submodel = {
        "modelType": "Submodel",
        "id": SUBMODEL_ID,
        "idShort": "TechnicalData",
        "semanticId": _external_reference("https://admin-shell.io/ZVEI/TechnicalData/Submodel/1/2"),
        "submodelElements": [
            _property("ManufacturerName", "Example Manufacturer", "0173-1#02-AAO677#002"),
            _property("ManufacturerProductDesignation", "Example Product", "0173-1#02-AAW338#001"),
            _property("SerialNumber", "SN-12345-67890", "0173-1#02-AAM556#002"),
            {
                "modelType": "File",
                "idShort": "TechnicalDocumentation",
                "contentType": "application/pdf",
                "value": "/aasx-suppl/documentation.pdf",
                "semanticId": _external_reference("0173-1#02-AAV232#001"),
            },
        ],
    }
    return {"assetAdministrationShells": [shell], "submodels": [submodel]}


def main():
    output = Path("output/example.aasx")
    output.parent.mkdir(exist_ok=True)

    packaging = Packaging()

    print("Writing package...")
    with packaging.create(output) as pkg:
        environment = json.dumps(create_environment(), indent=2).encode("utf-8")
        spec = pkg.put_part("/aasx/aas.json", "application/json", environment)
        pkg.make_spec(spec)

        documentation = pkg.put_part("/aasx-suppl/documentation.pdf", "application/pdf",
                                     b"%PDF-1.4\n%%EOF\n")
        pkg.relate_supplementary_to_spec(documentation, spec)

        thumbnail = pkg.put_part("/thumbnail.png", "image/png", b"\x89PNG\r\n\x1a\n")
        pkg.set_thumbnail(thumbnail)

        data = pkg.flush()
    print(f"   Saved {output} ({len(data)} bytes)")

    print("Reading package...")
    with packaging.open_read(output) as pkg:
        for spec in pkg.specs():
            print(f"   Spec: {spec.path} ({spec.content_type}, {spec.size} bytes)")
        for rel in pkg.supplementary_relationships():
            print(f"   Supplementary: {rel.supplementary.path} -> {rel.spec.path}")
        thumbnail = pkg.thumbnail()
        print(f"   Thumbnail: {thumbnail.path if thumbnail else '-'}")


if __name__ == "__main__":
    main()
