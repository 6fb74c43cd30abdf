"""gke-guestbook-render — preview the generated kubeconfig and guestbook manifest offline."""

import argparse
import sys

import requests
import yaml

from gke_guestbook.pacts.helpers import label_guestbook_object, render_kubeconfig
from gke_guestbook.pacts.types import GUESTBOOK_URL, StackSettings

FETCH_TIMEOUT = 30


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def load_manifest_text(source: str) -> str:
    """Read a manifest from a local path or an http(s) URL."""
    if source.startswith(("http://", "https://")):
        response = requests.get(source, timeout=FETCH_TIMEOUT)
        response.raise_for_status()
        return response.text
    with open(source, encoding="utf-8") as f:
        return f.read()


def parse_manifest(text: str) -> list[dict]:
    """Split a multi-document YAML manifest into objects, skipping empty documents."""
    return [doc for doc in yaml.safe_load_all(text) if doc and isinstance(doc, dict)]


# ---------------------------------------------------------------------------
# Transform
# ---------------------------------------------------------------------------

def _full_name(obj: dict) -> str:
    """Return 'Kind/name' string for progress messages."""
    meta = obj.get("metadata") or {}
    return f"{obj.get('kind', '?')}/{meta.get('name', '?')}"


def _service_type(obj: dict) -> str | None:
    """Return spec.type when the object has a spec mapping."""
    spec = obj.get("spec")
    return spec.get("type") if isinstance(spec, dict) else None


def transform_manifests(objects: list[dict], namespace_name: str, app_labels: dict,
                        label_key: str = "appClass") -> list[str]:
    """Apply the guestbook transform to every object. Returns change notes."""
    notes = []
    for obj in objects:
        before = _service_type(obj)
        label_guestbook_object(obj, namespace_name, app_labels, label_key)
        after = _service_type(obj)
        if after != before:
            notes.append(f"{_full_name(obj)} -> {after}")
    return notes


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

def _cmd_kubeconfig(args) -> int:
    """Print a kubeconfig for the given cluster coordinates."""
    sys.stdout.write(render_kubeconfig(args.project, args.zone, args.name,
                                       args.endpoint, args.ca_data))
    return 0


def _cmd_manifest(args) -> int:
    """Print the transformed guestbook manifest."""
    objects = parse_manifest(load_manifest_text(args.file))
    if not objects:
        print(f"No objects found in {args.file} — nothing to render.", file=sys.stderr)
        return 1
    print(f"Loaded {len(objects)} objects from {args.file}", file=sys.stderr)

    settings = StackSettings(name=args.name, app_label_key=args.label_key)
    for note in transform_manifests(objects, args.namespace, settings.app_labels,
                                    settings.app_label_key):
        print(note, file=sys.stderr)
    yaml.safe_dump_all(objects, sys.stdout, default_flow_style=False, sort_keys=False)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Argument parser with the kubeconfig and manifest subcommands."""
    parser = argparse.ArgumentParser(
        prog="gke-guestbook-render",
        description="Render the stack's kubeconfig or transformed guestbook manifest",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    kc = sub.add_parser("kubeconfig", help="Render a GKE kubeconfig")
    kc.add_argument("--project", required=True, help="GCP project")
    kc.add_argument("--zone", required=True, help="GCP zone")
    kc.add_argument("--name", required=True, help="Cluster name")
    kc.add_argument("--endpoint", required=True, help="Cluster API endpoint (host or IP)")
    kc.add_argument("--ca-data", required=True, help="Base64 cluster CA certificate")
    kc.set_defaults(func=_cmd_kubeconfig)

    mf = sub.add_parser("manifest", help="Render the transformed guestbook manifest")
    mf.add_argument(
        "--file", default=GUESTBOOK_URL,
        help="Manifest path or URL (default: upstream guestbook.yaml)",
    )
    mf.add_argument(
        "--namespace", default="helloworld",
        help="Namespace name written into existing labels (default: helloworld)",
    )
    mf.add_argument(
        "--name", default=StackSettings.name,
        help=f"App name for the default label set (default: {StackSettings.name})",
    )
    mf.add_argument(
        "--label-key", default=StackSettings.app_label_key,
        help=f"Label key carrying the app/namespace name (default: {StackSettings.app_label_key})",
    )
    mf.set_defaults(func=_cmd_manifest)
    return parser


def main(argv: list[str] | None = None):
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
