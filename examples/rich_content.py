from branchline import Tree
from rich import print
from rich.table import Table


def main() -> None:
    table = Table("metric", "value")
    table.add_row("latency p99", "182 ms")
    table.add_row("error rate", "0.4%")

    tree = Tree("Monitoring", guide="double")
    tree.add_node("Dashboards").add_node(table)
    tree.add_node("Alerts").add_nodes("pager", "email")
    print(tree)
    plain = Tree("ASCII only", guide="ascii")
    plain.add_node("plain")
    print(plain)


if __name__ == "__main__":
    main()
