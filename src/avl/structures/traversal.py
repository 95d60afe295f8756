import sys
from collections import deque
from typing import Iterator, List, Optional, TextIO
from src.avl.models.avl_node import AVLNode

def in_order(node: Optional[AVLNode]) -> Iterator[AVLNode]:
    """Percorre os nós em ordem crescente de chave."""
    if node:
        yield from in_order(node.left)
        yield node
        yield from in_order(node.right)


def format_tree_inorder(node: Optional[AVLNode], depth: int = 0) -> List[str]:
    """
    Listagem em ordem crescente, uma linha por nó no formato "chave [altura]",
    recuada um espaço por nível de profundidade.
    """
    lines: List[str] = []
    _format_recursive(node, depth, lines)
    return lines


def _format_recursive(node: Optional[AVLNode], depth: int, lines: List[str]):
    if node is None:
        return
    _format_recursive(node.left, depth + 1, lines)
    lines.append(f"{' ' * depth}{node.key} [{node.height}]")
    _format_recursive(node.right, depth + 1, lines)


def print_tree_inorder(node: Optional[AVLNode], depth: int = 0, out: Optional[TextIO] = None):
    stream = out if out is not None else sys.stdout
    for line in format_tree_inorder(node, depth):
        print(line, file=stream)


def level_order(node: Optional[AVLNode]) -> List[List[int]]:
    """Chaves nível a nível (BFS), da raiz para as folhas."""
    if node is None:
        return []

    levels: List[List[int]] = []
    queue = deque([node])

    while queue:
        level = []
        for _ in range(len(queue)):
            current = queue.popleft()
            level.append(current.key)
            if current.left:
                queue.append(current.left)
            if current.right:
                queue.append(current.right)
        levels.append(level)

    return levels


def delete_tree(node: Optional[AVLNode]) -> int:
    """
    Desmonta a árvore em pós-ordem, desligando cada nó exatamente uma vez.
    Retorna o número de nós liberados (0 para árvore vazia).
    """
    if node is None:
        return 0
    released = delete_tree(node.left) + delete_tree(node.right)
    node.left = None
    node.right = None
    node.value = None
    return released + 1
