# Node identifiers are single uppercase letters, so a topology holds at most 26 nodes
NODE_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
MAX_NODES = len(NODE_ALPHABET)

# hop count reported for an unreachable destination (look-ahead comparison)
INFINITE_HOPS = float('inf')

# Policies in the order they are run and reported
POLICY_ORDER = ["SHPF", "SDPF", "LLP", "MFC", "SHPO"]

# default input files, looked up in the working directory
TOPOLOGY_FILE = "topology.dat"
WORKLOAD_FILE = "callworkload.dat"

# Result table layout (column title, summary key, printf-style format)
REPORT_COLUMNS = [
    ("Policy", "policy", "{:<12}"),
    ("Total Calls", "total_calls", "{:<12.0f}"),
    ("Successful", "successful_calls", "{:<12.0f}"),
    ("Success(%)", "success_rate", "{:<12.2f}"),
    ("Blocked", "blocked_calls", "{:<12.0f}"),
    ("Blocked(%)", "blocked_rate", "{:<12.2f}"),
    ("Avg Hops", "avg_hops", "{:<12.4f}"),
    ("Avg Delay", "avg_delay", "{:<12.4f}"),
]
REPORT_RULE = "=" * 121
