from branchline import Tree
from rich.console import Console


def main() -> None:
    tree = Tree("[bold]Deep Chain[/bold]", guide="bold")
    branch_a = tree.add_node("[cyan]Branch A[/cyan]")
    branch_b = tree.add_node("[cyan]Branch B[/cyan]")

    current = branch_a
    for i in range(1, 30):
        color = ["green", "yellow", "blue", "red", "magenta"][i % 5]
        current = current.add_node(f"[{color}]A-Node-{i}[/{color}]")

    for i in range(1, 4):
        branch_b.add_node(f"[green]B-Leaf-{i}[/green]")

    console = Console()
    console.print(tree)
    console.print(f"width: {tree.width}")


if __name__ == "__main__":
    main()
