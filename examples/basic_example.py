from branchline import Tree
from rich import print


def main() -> None:
    tree = Tree("[bold magenta]Service Topology[/bold magenta]", style="#0a7e89")
    api = tree.add_node("[cyan]API Gateway[/cyan]")
    api.add_nodes("Auth", "Rate limiter")
    workers = tree.add_node("[cyan]Worker Pool[/cyan]")
    workers.add_node("Queue consumer\nretries failed jobs three times")
    tree.add_node("[yellow]Data Store[/yellow]")
    print(tree)


if __name__ == "__main__":
    main()
