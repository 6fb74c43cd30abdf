"""Guestbook — remote YAML manifest applied with label/visibility transforms."""

import pulumi
import pulumi_kubernetes as k8s

from gke_guestbook.pacts.helpers import label_guestbook_object, load_balancer_ip


def make_guestbook_transformation(namespace_name, app_labels: dict, label_key: str = "appClass"):
    """Build the ConfigFile transformation sharing labels with the NGINX stack.

    ``namespace_name`` may be a plain string or an Output; the Kubernetes
    provider resolves Outputs nested in the object before applying it.
    """
    def transform(obj: dict, opts: pulumi.ResourceOptions | None = None) -> None:
        label_guestbook_object(obj, namespace_name, app_labels, label_key)
    return transform


def create_guestbook(url: str, namespace_name, app_labels: dict, provider: k8s.Provider,
                     label_key: str = "appClass") -> k8s.yaml.ConfigFile:
    """Declare every object of the guestbook manifest at ``url``."""
    pulumi.log.debug(f"Loading guestbook manifest from {url}")
    return k8s.yaml.ConfigFile(
        "guestbook",
        file=url,
        transformations=[make_guestbook_transformation(namespace_name, app_labels, label_key)],
        opts=pulumi.ResourceOptions(provider=provider),
    )


def guestbook_public_ip(guestbook: k8s.yaml.ConfigFile) -> pulumi.Output:
    """Public load balancer IP of the guestbook 'frontend' Service."""
    frontend = guestbook.get_resource("v1/Service", "frontend")
    return frontend.apply(lambda svc: svc.status).apply(load_balancer_ip)
