"""GKE cluster with NGINX and the Kubernetes guestbook, declared with Pulumi."""
