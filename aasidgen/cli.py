"""aasidgen command line interface."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from .documents import DocumentIdGenerator
from .errors import IdConfigurationError, IdGenerationError
from .factory import create_id_provider
from .idshort import normalize_id_short
from .options import DigitsMode, IdOptions, IdScheme
from .providers import IdProvider

logger = logging.getLogger(__name__)


def _split_submodel(item: str) -> tuple[str, str]:
    if ":" not in item:
        raise IdConfigurationError(
            f"Invalid submodel '{item}'. Expected AAS:SUBMODEL.", field="submodel", value=item
        )
    aas_id_short, submodel_id_short = item.split(":", 1)
    return aas_id_short, submodel_id_short


def _derive(provider: IdProvider, args: argparse.Namespace) -> list[dict[str, str]]:
    name = normalize_id_short if args.normalize else (lambda value: value)
    results: list[dict[str, str]] = []
    for item in args.shells or []:
        results.append({"kind": "shell", "key": name(item), "id": provider.get_shell_id(name(item))})
    for item in args.assets or []:
        results.append({"kind": "asset", "key": name(item), "id": provider.get_asset_id(name(item))})
    for item in args.submodels or []:
        aas_id_short, submodel_id_short = (name(part) for part in _split_submodel(item))
        results.append(
            {
                "kind": "submodel",
                "key": f"{aas_id_short}:{submodel_id_short}",
                "id": provider.get_submodel_id(aas_id_short, submodel_id_short),
            }
        )
    for item in args.concepts or []:
        results.append(
            {"kind": "concept", "key": name(item), "id": provider.get_concept_description_id(name(item))}
        )
    return results


def _print_output(payload: dict[str, Any], *, as_json: bool) -> None:
    if as_json:
        print(json.dumps(payload, sort_keys=True))
        return

    for item in payload.get("ids", []):
        print(f"{item['kind']}\t{item['key']}\t{item['id']}")
    for document_id in payload.get("document_ids", []):
        print(document_id)

    errors = payload.get("errors")
    if isinstance(errors, list) and errors:
        print("errors:")
        for item in errors:
            print(f"  - {item.get('code', '<unknown>')}: {item.get('message', '')}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aasidgen")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    derive_parser = subparsers.add_parser("derive", help="Derive AAS identifiers from idShorts")
    derive_parser.add_argument(
        "--scheme",
        default=IdScheme.EXAMPLE_IRI.value,
        help="Identifier scheme (example_iri or uuid_urn)",
    )
    derive_parser.add_argument("--base-iri", help="Base IRI for example_iri identifiers")
    derive_parser.add_argument(
        "--digits-mode",
        default=DigitsMode.DETERMINISTIC_HASH.value,
        help="Digit policy (deterministic_hash or random_secure)",
    )
    derive_parser.add_argument("--max-attempts", type=int, help="Bound the collision probe")
    derive_parser.add_argument("--shell", dest="shells", action="append", help="Shell idShort")
    derive_parser.add_argument("--asset", dest="assets", action="append", help="Asset idShort")
    derive_parser.add_argument(
        "--submodel", dest="submodels", action="append", help="Submodel in AAS:SUBMODEL form"
    )
    derive_parser.add_argument(
        "--concept", dest="concepts", action="append", help="Concept description idShort"
    )
    derive_parser.add_argument(
        "--normalize", action="store_true", help="Normalize names into idShorts first"
    )
    derive_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    documents_parser = subparsers.add_parser("document-ids", help="Emit sequential document ids")
    documents_parser.add_argument("--seed", type=int, help="First document id")
    documents_parser.add_argument("--count", type=int, default=1, help="Number of ids")
    documents_parser.add_argument("--json", action="store_true", help="Emit JSON output")

    return parser


def _run(args: argparse.Namespace) -> int:
    if args.command == "derive":
        settings: dict[str, Any] = {
            "id_scheme": args.scheme,
            "digits_mode": args.digits_mode,
            "max_attempts": args.max_attempts,
        }
        if args.base_iri is not None:
            settings["base_iri"] = args.base_iri
        provider = create_id_provider(IdOptions.from_mapping(settings))
        payload = {"ok": True, "scheme": provider.scheme, "ids": _derive(provider, args)}
        _print_output(payload, as_json=bool(args.json))
        return 0

    if args.command == "document-ids":
        options = IdOptions.from_mapping({} if args.seed is None else {"document_id_seed": args.seed})
        if args.count < 0:
            raise IdConfigurationError("--count must be non-negative.", field="count", value=args.count)
        generator = DocumentIdGenerator(options.document_id_seed)
        payload = {"ok": True, "document_ids": [generator.next_id() for _ in range(args.count)]}
        _print_output(payload, as_json=bool(args.json))
        return 0

    raise IdConfigurationError(f"Unsupported command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return _run(args)
    except IdGenerationError as exc:
        logger.debug("Command failed", exc_info=True)
        payload = {"ok": False, "errors": [exc.to_dict()]}
        _print_output(payload, as_json=bool(getattr(args, "json", False)))
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
