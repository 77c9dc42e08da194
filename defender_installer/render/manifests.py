"""Kubernetes / OpenShift manifest generation for the Defender DaemonSet."""

import yaml

from defender_installer.spec.types import TOKEN_ENV_VAR, DeploymentSpec, Platform

NAMESPACE_FILE = "01-namespace.yaml"
SERVICE_ACCOUNT_FILE = "02-service-account.yaml"
CLUSTER_ROLE_FILE = "03-cluster-role.yaml"
CLUSTER_ROLE_BINDING_FILE = "04-cluster-role-binding.yaml"
DAEMONSET_FILE = "05-daemonset.yaml"
SCC_GRANTS_FILE = "06-security-policy-grants.txt"

# Read-only access the Defender needs to inspect the cluster.
CLUSTER_ROLE_RESOURCES = ["pods", "nodes", "namespaces", "secrets", "nodes/proxy"]
CLUSTER_ROLE_VERBS = ["get", "list", "watch"]

# SCCs the service account must be granted on OpenShift.
OPENSHIFT_SCCS = ["privileged", "hostnetwork", "hostmount-anyuid"]

RUNTIME_SOCKET_VOLUME = "runtime-sock"


def manifest_dir_name(spec: DeploymentSpec) -> str:
    """Output directory for a spec's manifests: <platform>-<name>."""
    return f"{spec.cluster.platform.value}-{spec.name}"


def service_account_name(spec):
    return f"{spec.name}-sa"


def cluster_role_name(spec):
    return f"{spec.name}-role"


def cluster_role_binding_name(spec):
    return f"{spec.name}-binding"


def _dump(doc):
    return yaml.safe_dump(doc, sort_keys=False, default_flow_style=False)


def _env_var(entry):
    key, _, value = entry.partition("=")
    return {"name": key, "value": value}


def generate_namespace(spec):
    return _dump({
        "apiVersion": "v1",
        "kind": "Namespace",
        "metadata": {"name": spec.cluster.namespace},
    })


def generate_service_account(spec):
    return _dump({
        "apiVersion": "v1",
        "kind": "ServiceAccount",
        "metadata": {
            "name": service_account_name(spec),
            "namespace": spec.cluster.namespace,
        },
    })


def generate_cluster_role(spec):
    return _dump({
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "ClusterRole",
        "metadata": {"name": cluster_role_name(spec)},
        "rules": [
            {
                "apiGroups": [""],
                "resources": list(CLUSTER_ROLE_RESOURCES),
                "verbs": list(CLUSTER_ROLE_VERBS),
            }
        ],
    })


def generate_cluster_role_binding(spec):
    return _dump({
        "apiVersion": "rbac.authorization.k8s.io/v1",
        "kind": "ClusterRoleBinding",
        "metadata": {"name": cluster_role_binding_name(spec)},
        "roleRef": {
            "apiGroup": "rbac.authorization.k8s.io",
            "kind": "ClusterRole",
            "name": cluster_role_name(spec),
        },
        "subjects": [
            {
                "kind": "ServiceAccount",
                "name": service_account_name(spec),
                "namespace": spec.cluster.namespace,
            }
        ],
    })


def generate_daemonset(spec):
    """One privileged Defender pod per node, sharing the host network and PID namespace.

    The registration token is injected as a literal value; an unset token
    renders as an empty value for the operator to fill in.
    """
    socket_path = spec.cluster.platform.runtime_socket
    labels = {"app": spec.name}

    env = [{"name": TOKEN_ENV_VAR, "value": spec.token or ""}]
    env.extend(_env_var(entry) for entry in spec.env)

    volume_mounts = [{"name": RUNTIME_SOCKET_VOLUME, "mountPath": socket_path}]
    volumes = [{"name": RUNTIME_SOCKET_VOLUME, "hostPath": {"path": socket_path}}]
    for i, mount in enumerate(spec.mounts):
        volume_name = f"host-mount-{i}"
        volume_mounts.append({"name": volume_name, "mountPath": mount.container_path})
        volumes.append({"name": volume_name, "hostPath": {"path": mount.host_path}})

    return _dump({
        "apiVersion": "apps/v1",
        "kind": "DaemonSet",
        "metadata": {
            "name": spec.name,
            "namespace": spec.cluster.namespace,
            "labels": dict(labels),
        },
        "spec": {
            "selector": {"matchLabels": dict(labels)},
            "template": {
                "metadata": {"labels": dict(labels)},
                "spec": {
                    "serviceAccountName": service_account_name(spec),
                    "hostNetwork": True,
                    "hostPID": True,
                    "dnsPolicy": "ClusterFirstWithHostNet",
                    "tolerations": [{"operator": "Exists"}],
                    "containers": [
                        {
                            "name": "defender",
                            "image": spec.image,
                            "securityContext": {"privileged": True},
                            "env": env,
                            "volumeMounts": volume_mounts,
                        }
                    ],
                    "volumes": volumes,
                },
            },
        },
    })


def generate_scc_grants(spec):
    """Advisory commands granting OpenShift SCCs to the Defender service account."""
    sa = service_account_name(spec)
    ns = spec.cluster.namespace
    commands = "\n".join(f"oc adm policy add-scc-to-user {scc} -z {sa} -n {ns}" for scc in OPENSHIFT_SCCS)
    return f"""# OpenShift security context constraints for the Defender DaemonSet.
# These are not applied by the manifests in this directory. Run them as a
# cluster administrator before applying {DAEMONSET_FILE}.

{commands}
"""


def generate_manifests(spec: DeploymentSpec) -> list[tuple[str, str]]:
    """Render the ordered (filename, content) documents for a manifests-mode spec.

    The numeric filename prefix is the apply order.
    """
    docs = [
        (NAMESPACE_FILE, generate_namespace(spec)),
        (SERVICE_ACCOUNT_FILE, generate_service_account(spec)),
        (CLUSTER_ROLE_FILE, generate_cluster_role(spec)),
        (CLUSTER_ROLE_BINDING_FILE, generate_cluster_role_binding(spec)),
        (DAEMONSET_FILE, generate_daemonset(spec)),
    ]
    if spec.cluster.platform is Platform.OPENSHIFT:
        docs.append((SCC_GRANTS_FILE, generate_scc_grants(spec)))
    return docs
