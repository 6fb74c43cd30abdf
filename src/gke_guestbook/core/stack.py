"""Stack orchestration — wire cluster, NGINX and guestbook into one graph."""

import pulumi

from gke_guestbook.core.cluster import provision_cluster
from gke_guestbook.core.guestbook import create_guestbook, guestbook_public_ip
from gke_guestbook.core.workloads import deploy_nginx
from gke_guestbook.pacts.helpers import load_balancer_ip
from gke_guestbook.pacts.types import StackSettings


def build_stack(settings: StackSettings) -> dict[str, pulumi.Output]:
    """Declare every resource and return the stack outputs by export name."""
    cluster = provision_cluster(settings)
    nginx = deploy_nginx(settings, cluster.provider)
    guestbook = create_guestbook(
        settings.guestbook_url, nginx.namespace_name, settings.app_labels,
        cluster.provider, label_key=settings.app_label_key,
    )
    return {
        "clusterName": cluster.cluster.name,
        "kubeconfig": cluster.kubeconfig,
        "namespaceName": nginx.namespace_name,
        "deploymentName": nginx.deployment.metadata.apply(lambda m: m.name),
        "serviceName": nginx.service.metadata.apply(lambda m: m.name),
        "servicePublicIP": nginx.service.status.apply(load_balancer_ip),
        "guestbookPublicIP": guestbook_public_ip(guestbook),
    }


def export_outputs(outputs: dict[str, pulumi.Output]) -> None:
    """Publish stack outputs to the engine."""
    for name, value in outputs.items():
        pulumi.export(name, value)
