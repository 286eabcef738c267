"""Switch the active kubeconfig by repointing ~/.kube/config."""
