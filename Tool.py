import os
import re

from params import NODE_ALPHABET, MAX_NODES


def parse_node_label(token):
    """Validate a node identifier from an input record (a single letter A-Z)."""
    label = token.strip()
    if len(label) != 1 or label not in NODE_ALPHABET:
        raise ValueError(f"invalid node identifier {token!r}: expected a single letter A-Z")
    return label


def intern_labels(labels):
    """
    Assign matrix indices to node labels.

    Indices follow alphabetical order so that the lowest-index tie-break in the
    path search prefers the same nodes as a letter-indexed network would.
    """
    ordered = sorted(set(parse_node_label(label) for label in labels))
    if len(ordered) > MAX_NODES:
        raise ValueError(f"topology has {len(ordered)} nodes, at most {MAX_NODES} are supported")
    return ordered, {label: i for i, label in enumerate(ordered)}


def format_matrix(matrix, labels):
    """Render a node-indexed matrix with letter headers, '//' on the diagonal."""
    lines = ["\t" + "\t".join(labels)]
    for i, row_label in enumerate(labels):
        cells = []
        for j in range(len(labels)):
            if i == j:
                cells.append("//")
            else:
                value = matrix[i][j]
                cells.append(f"{value:g}" if isinstance(value, float) else str(value))
        lines.append(row_label + "\t" + "\t".join(cells))
    return "\n".join(lines)


def get_next_exp_number(output_path):
    """Return the next free experiment number under output_path (exp_0, exp_1, ...)."""
    if not os.path.exists(output_path):
        return 0

    existing_dirs = [d for d in os.listdir(output_path)
                     if os.path.isdir(os.path.join(output_path, d)) and re.match(r'exp_\d+$', d)]

    numbers = []
    for dir_name in existing_dirs:
        try:
            numbers.append(int(dir_name.split('_')[1]))
        except (IndexError, ValueError):
            continue

    if numbers:
        return max(numbers) + 1
    else:
        return 0
