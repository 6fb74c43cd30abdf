"""Stack configuration — read Pulumi config into StackSettings."""

import pulumi
import pulumi_gcp as gcp

from gke_guestbook.pacts.types import StackSettings


def _or_default(value, default):
    """Keep explicit falsy settings (0, []); only unset keys take the default."""
    return value if value is not None else default


def load_settings(config: pulumi.Config | None = None) -> StackSettings:
    """Load stack settings, falling back to defaults for every unset key."""
    cfg = config if config is not None else pulumi.Config()
    defaults = StackSettings()
    settings = StackSettings(
        name=cfg.get("name") or defaults.name,
        project=gcp.config.project,
        zone=gcp.config.zone,
        node_count=_or_default(cfg.get_int("nodeCount"), defaults.node_count),
        machine_type=cfg.get("machineType") or defaults.machine_type,
        disk_type=cfg.get("diskType") or defaults.disk_type,
        oauth_scopes=_or_default(cfg.get_object("oauthScopes"), defaults.oauth_scopes),
        nginx_image=cfg.get("nginxImage") or defaults.nginx_image,
        nginx_replicas=_or_default(cfg.get_int("nginxReplicas"), defaults.nginx_replicas),
        guestbook_url=cfg.get("guestbookUrl") or defaults.guestbook_url,
        app_label_key=cfg.get("appLabelKey") or defaults.app_label_key,
    )
    # The kubeconfig context name embeds both; an unset one still renders
    for key in ("project", "zone"):
        if not getattr(settings, key):
            pulumi.log.warn(f"gcp:{key} is not set; kubeconfig context will contain 'None'")
    return settings
