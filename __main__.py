"""gke-guestbook — GKE cluster running NGINX and the Kubernetes guestbook."""

from gke_guestbook.core.config import load_settings
from gke_guestbook.core.stack import build_stack, export_outputs


# ---------------------------------------------------------------------------
# Program
# ---------------------------------------------------------------------------

def main():
    """Pulumi program entry point."""
    settings = load_settings()
    export_outputs(build_stack(settings))


if __name__ == "__main__":
    main()
