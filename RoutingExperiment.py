import argparse
import json
import os

import matplotlib.pyplot as plt

from CallEvent import load_scenario
from Simulator import Simulator
from Tool import get_next_exp_number
from params import POLICY_ORDER, REPORT_COLUMNS, REPORT_RULE, TOPOLOGY_FILE, WORKLOAD_FILE


def format_header():
    titles = [f"{title:<12}" for title, _, _ in REPORT_COLUMNS]
    return "\t".join(titles) + "\n" + REPORT_RULE


def format_row(metrics):
    return "\t".join(fmt.format(metrics[key]) for _, key, fmt in REPORT_COLUMNS)


def format_report(results):
    lines = [format_header()]
    for policy, metrics in results.items():
        lines.append(format_row(dict(metrics, policy=policy)))
    return "\n".join(lines)


def plot_results(results, output_dir):
    policies = list(results)
    figures = [
        ("blocked_rate", "Blocked Calls (%)", "Blocking Probability by Policy", "blocking_comparison.png"),
        ("avg_hops", "Average Hops per Call", "Average Hops by Policy", "avg_hops_comparison.png"),
        ("avg_delay", "Average Propagation Delay", "Average Propagation Delay by Policy",
         "avg_delay_comparison.png"),
    ]

    saved = []
    for key, ylabel, title, filename in figures:
        plt.figure(figsize=(10, 6))
        plt.bar(policies, [results[p][key] for p in policies])
        plt.xlabel("Policy")
        plt.ylabel(ylabel)
        plt.title(title)
        plt.grid(True, axis="y")
        path = os.path.join(output_dir, filename)
        plt.savefig(path)
        plt.close()
        saved.append(path)
    return saved


def run_experiments(topology_file=TOPOLOGY_FILE, workload_file=WORKLOAD_FILE, output_dir="results",
                    policies=POLICY_ORDER, plot=True, show_progress=False):
    os.makedirs(output_dir, exist_ok=True)

    exp_number = get_next_exp_number(output_dir)
    output_dir = os.path.join(output_dir, f"exp_{exp_number}")
    os.makedirs(output_dir, exist_ok=True)
    print(f"Results will be saved to: {output_dir}")

    topology, events = load_scenario(topology_file, workload_file)
    print(f"Loaded {topology.num_nodes} nodes, {len(topology.edges())} links and {len(events)} calls")

    simulator = Simulator(topology, events, show_progress=show_progress)
    results = simulator.run_all(policies)

    print(format_report(results))

    for policy, metrics in results.items():
        with open(os.path.join(output_dir, f"{policy}_results.json"), 'w') as f:
            json.dump(metrics, f, indent=2)
    with open(os.path.join(output_dir, "summary.json"), 'w') as f:
        json.dump({
            "topology_file": str(topology_file),
            "workload_file": str(workload_file),
            "nodes": topology.labels,
            "policies": list(results),
            "results": results,
        }, f, indent=2)

    if plot:
        plot_results(results, output_dir)

    print(f"All results saved to {output_dir} directory")
    return results, output_dir


def main(argv=None):
    parser = argparse.ArgumentParser(description="Circuit-switched call routing policy comparison")
    parser.add_argument("--topology", type=str, default=TOPOLOGY_FILE, help="Path to the topology file.")
    parser.add_argument("--workload", type=str, default=WORKLOAD_FILE, help="Path to the call workload file.")
    parser.add_argument("--output", type=str, default="results", help="Directory for result files.")
    parser.add_argument("--policies", nargs="+", default=POLICY_ORDER, help="Policies to simulate, in order.")
    parser.add_argument("--no-plots", action="store_true", help="Skip the comparison plots.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar per policy.")
    args = parser.parse_args(argv)

    run_experiments(args.topology, args.workload, args.output, args.policies,
                    plot=not args.no_plots, show_progress=args.progress)


if __name__ == "__main__":
    main()
