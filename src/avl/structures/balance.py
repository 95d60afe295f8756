from typing import Optional
from src.avl.models.avl_node import AVLNode

class BalanceCase:
    """
    Classificação fechada do estado de um nó.
    LEFT_RIGHT / RIGHT_LEFT são os casos em zigue-zague (rotação dupla).
    """
    BALANCED = "BALANCEADO"
    LEFT_LEFT = "ESQUERDA_ESQUERDA"
    LEFT_RIGHT = "ESQUERDA_DIREITA"
    RIGHT_RIGHT = "DIREITA_DIREITA"
    RIGHT_LEFT = "DIREITA_ESQUERDA"


def height(node: Optional[AVLNode]) -> int:
    """
    Altura de referência, calculada recursivamente. O(n).
    Só serve para conferir o cache; os caminhos quentes usam get_height.
    """
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def get_height(node: Optional[AVLNode]) -> int:
    if not node:
        return 0
    return node.height


def update_height(node: Optional[AVLNode]):
    """Recalcula a altura a partir das alturas (já corretas) dos filhos. O(1)."""
    if node is None:
        return
    node.height = 1 + max(get_height(node.left), get_height(node.right))


def balance_factor(node: Optional[AVLNode]) -> int:
    if not node:
        return 0
    return get_height(node.left) - get_height(node.right)


def classify(node: Optional[AVLNode]) -> str:
    """
    Decide qual caso de rotação se aplica ao nó.
    Fator zero no filho pesado escolhe sempre a rotação simples.
    """
    balance = balance_factor(node)

    if -1 <= balance <= 1:
        return BalanceCase.BALANCED

    # Inserção/remoção alteram no máximo um nível abaixo de cada ancestral
    if abs(balance) > 2:
        raise ValueError(f"Fator de balanceamento {balance} fora do limite no nó {node.key}.")

    if balance > 1:
        if balance_factor(node.left) < 0:
            return BalanceCase.LEFT_RIGHT
        return BalanceCase.LEFT_LEFT

    if balance_factor(node.right) > 0:
        return BalanceCase.RIGHT_LEFT
    return BalanceCase.RIGHT_RIGHT
