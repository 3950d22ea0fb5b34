# kubetin

Building blocks for a multi-cluster Kubernetes terminal dashboard. The package
finds kubeconfig files and keeps a trust list for them. It also holds the
terminal-independent logic behind the dashboard's views and dialogs.

## Modules

- `kubetin.discover` finds kubeconfig files and lists their contexts.
  - `candidate_files()` returns the entries of `$KUBECONFIG` that exist, or
    the `~/.kube/config*` files when that variable is unset. It skips
    `kubectx`, `kubens`, `*.swp` and `*~`.
  - `load_kubeconfig(path)` parses one file with YAML.
  - `discover()` and `discover_trusted(trust_list)` return a `Discovered`
    with the fields `files`, `refs`, `configs` and `contexts`.
  - Files are never merged. A context name found in more than one file
    becomes `name (file)`. If that name still collides, it becomes
    `name (dir/file)`.
  - Failures raise `DiscoveryError`.
- `kubetin.trust` keeps the allow-list of kubeconfig files, keyed on the
  SHA-256 of their content.
  - `load_trust_list()` reads `$XDG_CONFIG_HOME/kubetin/trusted-kubeconfigs`,
    or `~/.config/kubetin/trusted-kubeconfigs` when that variable is unset.
  - `TrustList` offers `is_trusted`, `has_known_path`, `add`, `save`,
    `partition_files` and `is_empty`. `save` writes the file atomically with
    mode 0600.
  - A file that exists but cannot be read raises `TrustFileError`. The error
    carries the list loaded so far, with `existed` set, so you can tell a
    first run from a damaged file.
- `kubetin.events` works on event rows.
  - `EventRow`, `EventGroup` and `EventScope` hold the data.
  - `scoped_events` keeps the rows of one involved object.
  - `group_events` merges events that share a reason and message, newest
    first, with the reason breaking ties.
  - `recent_warning_index` and `total_event_count` give the warning lookup
    and the total count.
- `kubetin.actions` builds the action menu.
  - `Action`, `actions_for(kind)` and `verbs_for_action` give the entries
    and their RBAC gates.
  - `rbac_probe_set()`, `permission_key` and `PermissionState` cover
    permission checks and their cache.
  - `classify_actions` marks each action allowed, denied or pending.
    `first_selectable` finds the first allowed one.
  - Also here: `truncate`, `center_line`, `action_menu_title` and
    `action_menu_resource`.
- `kubetin.drain` tracks a node drain.
  - `DrainProgress.apply` folds in progress events.
  - `status_line` and `blocked_tail` give the text to show.
  - `drain_summary` gives the final message.
- `kubetin.confirm` handles typed delete confirmation.
  - `expected_confirmation(name)` gives the text to type: the last five
    characters of the name, or the whole name when it is shorter.
  - `DeleteConfirm` holds the prompt's state.
- `kubetin.deployments` covers the deployments table.
  - `DeploymentRow` holds one row.
  - `sorted_deploy_rows` and `filter_deploy_rows` order and filter rows.
  - `window_around` gives the cursor-centred window.
  - `ready_status` gives the READY cell and its severity.
- `kubetin.describe` covers the describe viewer.
  - `describe_title` and `ref_for_row` give the title and the object to
    describe. A Namespace row backed by the project API maps to an
    OpenShift Project.
  - `describe_window` gives the visible lines.
  - `describe_notices` gives the Secret and ConfigMap warnings.
- `kubetin.pickers` chooses a container for a shell.
  - `pick_exec_target(containers)` returns the only container, returns
    `None` when the user must choose, and raises `ValueError` when the
    list is empty.
  - `ContainerPicker` is the cursor for choosing.
- `kubetin.help` provides the keybinding help.
  - `HELP_GROUPS` lists the bindings.
  - `help_lines(build)` renders them as plain text.

## Usage

```python
from kubetin.trust import load_trust_list
from kubetin.discover import discover_trusted

trust_list = load_trust_list()
discovered, untrusted = discover_trusted(trust_list)

for path in untrusted:
    print("not trusted yet:", path)

for name in discovered.contexts:
    ref = discovered.ref_by_name(name)
    print(name, "from", ref.file, "namespace", ref.namespace or "-")
```

To trust a file after checking it:

```python
trust_list.add("/home/me/.kube/config-staging")
trust_list.save()
```

Trust is tied to content. A file that changes must be added again.

To group events:

```python
from kubetin.events import group_events, total_event_count

groups = group_events(rows)  # rows: mapping of uid -> EventRow
print(total_event_count(groups), "events in", len(groups), "groups")
```

To confirm a delete:

```python
from kubetin.confirm import expected_confirmation

expected_confirmation("nginx-7f9c")  # "-7f9c"
```

## What this package does not do

- It does not connect to any cluster. It runs no probes, watches,
  metrics queries, access reviews, deletes, drains or shells. Callers
  provide the rows, permission results and progress events.
- It has no command and no terminal screen. The modules return plain data
  and text lines for a front end to draw.
- It has no store of per-cluster reachability or resource usage, and no
  debug view of cluster probes.

## Installation

    pip install kubetin

To include the test dependencies:

    pip install "kubetin[test]"

## Running the tests

    pytest