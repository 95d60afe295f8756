from typing import Any, Optional

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave (inteiro único), o valor (opaco) e a altura em cache.
    Cada nó é o único dono das suas subárvores esquerda e direita.
    """
    def __init__(self, key: int, value: Any):
        self.key = key
        self.value = value      # Nunca inspecionado pela árvore
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        return f"AVLNode(key={self.key}, height={self.height})"


def create_node(key: int, value: Any) -> AVLNode:
    """Cria um nó isolado: altura 1 e sem filhos."""
    return AVLNode(key, value)
