"""Pure helper functions shared by the stack and the offline renderer."""

import yaml

AUTH_PLUGIN = "gke-gcloud-auth-plugin"
AUTH_PLUGIN_HINT = (
    "Install gke-gcloud-auth-plugin for use with kubectl by following "
    "https://cloud.google.com/blog/products/containers-kubernetes/kubectl-auth-changes-in-gke"
)

# The one guestbook Service exposed to the internet
PUBLIC_SERVICE = ("Service", "frontend")


def kubeconfig_context(project: str | None, zone: str | None, cluster_name: str) -> str:
    """Return the gcloud-style '<project>_<zone>_<cluster>' context name."""
    return f"{project}_{zone}_{cluster_name}"


def render_kubeconfig(project: str | None, zone: str | None, cluster_name: str,
                      endpoint: str, ca_data: str) -> str:
    """Build a GKE kubeconfig with a single cluster/context/user triple.

    GKE wants gcloud in the picture for authentication, so the user entry
    runs the exec plugin instead of carrying a client cert/key.
    """
    context = kubeconfig_context(project, zone, cluster_name)
    kubeconfig = {
        "apiVersion": "v1",
        "clusters": [{
            "cluster": {
                "certificate-authority-data": ca_data,
                "server": f"https://{endpoint}",
            },
            "name": context,
        }],
        "contexts": [{
            "context": {"cluster": context, "user": context},
            "name": context,
        }],
        "current-context": context,
        "kind": "Config",
        "preferences": {},
        "users": [{
            "name": context,
            "user": {
                "exec": {
                    "apiVersion": "client.authentication.k8s.io/v1beta1",
                    "command": AUTH_PLUGIN,
                    "installHint": AUTH_PLUGIN_HINT,
                    "provideClusterInfo": True,
                },
            },
        }],
    }
    return yaml.dump(kubeconfig, default_flow_style=False, sort_keys=False)


def _field(obj, attr: str, key: str):
    """Read a field from an SDK output type (snake_case) or a plain dict (camelCase)."""
    value = getattr(obj, attr, None)
    if value is None and isinstance(obj, dict):
        value = obj.get(key)
    return value


def load_balancer_ip(status) -> str | None:
    """Return the first load balancer ingress IP of a Service status, if assigned."""
    lb = _field(status, "load_balancer", "loadBalancer")
    ingress = _field(lb, "ingress", "ingress") or []
    if not ingress:
        return None
    return _field(ingress[0], "ip", "ip")


def label_guestbook_object(obj: dict, namespace_name, app_labels: dict,
                           label_key: str = "appClass") -> None:
    """Relabel one manifest object in place and publish the frontend Service.

    Objects with a labels mapping, even an empty one, get ``label_key`` set
    to the namespace name; others receive a copy of ``app_labels``. The ``frontend`` Service is switched to
    type LoadBalancer when it has a spec.
    """
    metadata = obj.setdefault("metadata", {})
    labels = metadata.get("labels")
    if isinstance(labels, dict):
        labels[label_key] = namespace_name
    else:
        metadata["labels"] = dict(app_labels)

    if (obj.get("kind"), metadata.get("name")) == PUBLIC_SERVICE:
        spec = obj.get("spec")
        if isinstance(spec, dict):
            spec["type"] = "LoadBalancer"
