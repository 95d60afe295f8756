import math
from typing import List, Optional
from src.avl.models.avl_node import AVLNode
from src.avl.structures.balance import balance_factor, height

AVL_HEIGHT_FACTOR = 1.44

def max_avl_height(n: int) -> float:
    """Limite clássico de altura da AVL: 1.44 * log2(n + 2)."""
    return AVL_HEIGHT_FACTOR * math.log2(n + 2)


def count_nodes(node: Optional[AVLNode]) -> int:
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def collect_violations(node: Optional[AVLNode]) -> List[str]:
    """
    Verifica, em cada nó:
    1. Ordem de BST (esquerda < nó < direita)
    2. Altura em cache igual à altura recursiva
    3. |fator de balanceamento| <= 1
    Retorna a lista de violações encontradas (vazia = árvore válida).
    """
    violations: List[str] = []
    _check_recursive(node, None, None, violations)
    return violations


def _check_recursive(node: Optional[AVLNode], low: Optional[int], high: Optional[int], violations: List[str]):
    if node is None:
        return

    if (low is not None and node.key <= low) or (high is not None and node.key >= high):
        violations.append(f"Ordem BST violada no nó {node.key} (limites {low}, {high})")

    real_height = height(node)
    if node.height != real_height:
        violations.append(f"Altura em cache {node.height} != {real_height} no nó {node.key}")

    balance = balance_factor(node)
    if abs(balance) > 1:
        violations.append(f"Fator de balanceamento {balance} no nó {node.key}")

    _check_recursive(node.left, low, node.key, violations)
    _check_recursive(node.right, node.key, high, violations)


def is_valid_avl(node: Optional[AVLNode]) -> bool:
    return not collect_violations(node)
