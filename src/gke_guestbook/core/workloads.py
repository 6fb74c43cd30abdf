"""NGINX workload — namespace, Deployment and public LoadBalancer Service."""

import pulumi
import pulumi_kubernetes as k8s

from gke_guestbook.pacts.types import NginxResources, StackSettings

HTTP_PORT = 80


def create_namespace(name: str, provider: k8s.Provider) -> k8s.core.v1.Namespace:
    """Namespace holding the NGINX workload (name auto-generated by Pulumi)."""
    return k8s.core.v1.Namespace(name, opts=pulumi.ResourceOptions(provider=provider))


def create_nginx_deployment(settings: StackSettings, namespace_name,
                            provider: k8s.Provider) -> k8s.apps.v1.Deployment:
    """Single-container NGINX Deployment exposing a named 'http' port."""
    labels = settings.app_labels
    return k8s.apps.v1.Deployment(
        settings.name,
        metadata=k8s.meta.v1.ObjectMetaArgs(namespace=namespace_name, labels=labels),
        spec=k8s.apps.v1.DeploymentSpecArgs(
            replicas=settings.nginx_replicas,
            selector=k8s.meta.v1.LabelSelectorArgs(match_labels=labels),
            template=k8s.core.v1.PodTemplateSpecArgs(
                metadata=k8s.meta.v1.ObjectMetaArgs(labels=labels),
                spec=k8s.core.v1.PodSpecArgs(containers=[
                    k8s.core.v1.ContainerArgs(
                        name=settings.name,
                        image=settings.nginx_image,
                        ports=[k8s.core.v1.ContainerPortArgs(name="http", container_port=HTTP_PORT)],
                    ),
                ]),
            ),
        ),
        opts=pulumi.ResourceOptions(provider=provider),
    )


def create_nginx_service(settings: StackSettings, namespace_name, provider: k8s.Provider,
                         deployment: k8s.apps.v1.Deployment | None = None) -> k8s.core.v1.Service:
    """LoadBalancer Service in front of the NGINX pods."""
    labels = settings.app_labels
    return k8s.core.v1.Service(
        settings.name,
        metadata=k8s.meta.v1.ObjectMetaArgs(namespace=namespace_name, labels=labels),
        spec=k8s.core.v1.ServiceSpecArgs(
            type="LoadBalancer",
            ports=[k8s.core.v1.ServicePortArgs(port=HTTP_PORT, target_port="http")],
            selector=labels,
        ),
        opts=pulumi.ResourceOptions(
            provider=provider,
            depends_on=[deployment] if deployment is not None else None,
        ),
    )


def deploy_nginx(settings: StackSettings, provider: k8s.Provider) -> NginxResources:
    """Namespace, then Deployment, then Service, all through ``provider``."""
    namespace = create_namespace(settings.name, provider)
    namespace_name = namespace.metadata.apply(lambda m: m.name)
    deployment = create_nginx_deployment(settings, namespace_name, provider)
    service = create_nginx_service(settings, namespace_name, provider, deployment=deployment)
    return NginxResources(namespace=namespace, deployment=deployment, service=service,
                          namespace_name=namespace_name)
