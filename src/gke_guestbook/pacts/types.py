"""Settings and resource bundles passed between the stack modules."""

from dataclasses import dataclass, field

import pulumi
import pulumi_gcp as gcp
import pulumi_kubernetes as k8s

DEFAULT_OAUTH_SCOPES = (
    "https://www.googleapis.com/auth/compute",
    "https://www.googleapis.com/auth/devstorage.read_only",
    "https://www.googleapis.com/auth/logging.write",
    "https://www.googleapis.com/auth/monitoring",
)

GUESTBOOK_URL = (
    "https://raw.githubusercontent.com/pulumi/pulumi-kubernetes/master/"
    "tests/sdk/nodejs/examples/yaml-guestbook/yaml/guestbook.yaml"
)


@dataclass
class StackSettings:
    """Everything the stack reads from configuration."""
    name: str = "helloworld"
    project: str | None = None
    zone: str | None = None
    node_count: int = 2
    machine_type: str = "n1-standard-1"
    disk_type: str = "pd-standard"
    oauth_scopes: list = field(default_factory=lambda: list(DEFAULT_OAUTH_SCOPES))
    nginx_image: str = "nginx:latest"
    nginx_replicas: int = 1
    guestbook_url: str = GUESTBOOK_URL
    app_label_key: str = "appClass"

    @property
    def app_labels(self) -> dict:
        """Label set shared by the NGINX workload and unlabelled guestbook objects."""
        return {self.app_label_key: self.name}


@dataclass
class ClusterResources:
    """The GKE cluster, its kubeconfig and the provider bound to it."""
    cluster: gcp.container.Cluster
    kubeconfig: pulumi.Output
    provider: k8s.Provider


@dataclass
class NginxResources:
    """Namespace, Deployment and Service of the NGINX workload."""
    namespace: k8s.core.v1.Namespace
    deployment: k8s.apps.v1.Deployment
    service: k8s.core.v1.Service
    namespace_name: pulumi.Output
