"""GKE cluster provisioning — cluster, kubeconfig, Kubernetes provider."""

import pulumi
import pulumi_gcp as gcp
import pulumi_kubernetes as k8s

from gke_guestbook.pacts.helpers import render_kubeconfig
from gke_guestbook.pacts.types import ClusterResources, StackSettings


def latest_engine_version() -> pulumi.Output:
    """Latest GKE master version available to the configured project/zone."""
    return gcp.container.get_engine_versions_output().latest_master_version


def create_cluster(settings: StackSettings) -> gcp.container.Cluster:
    """Declare the GKE cluster with masters and nodes pinned to the same version."""
    engine_version = latest_engine_version()
    return gcp.container.Cluster(
        settings.name,
        initial_node_count=settings.node_count,
        min_master_version=engine_version,
        node_version=engine_version,
        node_config=gcp.container.ClusterNodeConfigArgs(
            machine_type=settings.machine_type,
            disk_type=settings.disk_type,
            oauth_scopes=list(settings.oauth_scopes),
        ),
    )


def cluster_kubeconfig(cluster: gcp.container.Cluster, settings: StackSettings) -> pulumi.Output:
    """Render the kubeconfig once name, endpoint and CA certificate resolve."""
    kubeconfig = pulumi.Output.all(
        cluster.name,
        cluster.endpoint,
        cluster.master_auth.cluster_ca_certificate,
    ).apply(lambda args: render_kubeconfig(settings.project, settings.zone, *args))
    return pulumi.Output.secret(kubeconfig)


def create_cluster_provider(name: str, kubeconfig: pulumi.Output) -> k8s.Provider:
    """Kubernetes provider addressing the new cluster."""
    return k8s.Provider(name, kubeconfig=kubeconfig)


def provision_cluster(settings: StackSettings) -> ClusterResources:
    """Cluster, kubeconfig and provider in one go."""
    pulumi.log.info(f"Provisioning GKE cluster '{settings.name}' "
                    f"({settings.node_count} x {settings.machine_type})")
    cluster = create_cluster(settings)
    kubeconfig = cluster_kubeconfig(cluster, settings)
    provider = create_cluster_provider(settings.name, kubeconfig)
    return ClusterResources(cluster=cluster, kubeconfig=kubeconfig, provider=provider)
