from src.avl.models.avl_node import AVLNode
from src.avl.structures.balance import BalanceCase, classify, update_height

def right_rotation(y: AVLNode) -> AVLNode:
    """
    Realiza rotação simples à direita.
    Usada quando o peso está na esquerda (Left-Left).
    """
    x = y.left
    if x is None:
        raise ValueError(f"Rotação à direita exige filho esquerdo (nó {y.key}).")
    T2 = x.right

    # Rotação
    x.right = y
    y.left = T2

    # Atualiza alturas: primeiro o nó que desceu
    update_height(y)
    update_height(x)

    return x


def left_rotation(y: AVLNode) -> AVLNode:
    """
    Realiza rotação simples à esquerda.
    Usada quando o peso está na direita (Right-Right).
    """
    x = y.right
    if x is None:
        raise ValueError(f"Rotação à esquerda exige filho direito (nó {y.key}).")
    T2 = x.left

    x.left = y
    y.right = T2

    update_height(y)
    update_height(x)

    return x


def right_left_rotation(node: AVLNode) -> AVLNode:
    """Rotação dupla: direita no filho direito, depois esquerda no nó (Right-Left)."""
    node.right = right_rotation(node.right)
    return left_rotation(node)


def left_right_rotation(node: AVLNode) -> AVLNode:
    """Rotação dupla: esquerda no filho esquerdo, depois direita no nó (Left-Right)."""
    node.left = left_rotation(node.left)
    return right_rotation(node)


_DISPATCH = {
    BalanceCase.LEFT_LEFT: right_rotation,
    BalanceCase.LEFT_RIGHT: left_right_rotation,
    BalanceCase.RIGHT_RIGHT: left_rotation,
    BalanceCase.RIGHT_LEFT: right_left_rotation,
}


def rotation(node: AVLNode, verbose: bool = False) -> AVLNode:
    """
    Rebalanceia o nó se necessário e devolve a nova raiz da subárvore.
    A altura do nó deve ter sido atualizada antes da chamada.
    """
    case = classify(node)
    if case == BalanceCase.BALANCED:
        return node

    if verbose:
        print(f"[AVL ROTACAO] Caso {case} no nó {node.key}")

    new_root = _DISPATCH[case](node)

    if verbose:
        print(f"[AVL ROTACAO] Nova raiz da subárvore: {new_root.key}")
    return new_root
