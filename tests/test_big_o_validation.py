"""
Testes de validação de complexidade Big-O.
Valida empiricamente as garantias da AVL:
- Altura: <= 1.44 * log2(n + 2)
- Inserção/Busca/Remoção: O(log n)
"""
import sys
import os
import time
import math
import random
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.avl.structures.avl_tree import AVLTree
from src.avl.algorithms.invariants import collect_violations, count_nodes, max_avl_height

SIZES = [100, 500, 1000, 2000, 5000]

def test_sequential_insert_height_bound():
    print("--- Teste: Altura após inserir 1..1000 em ordem crescente ---")

    avl = AVLTree()
    for key in range(1, 1001):
        avl.insert(key, key)

    print(f"  Altura: {avl.height} (limite teórico {max_avl_height(1000):.2f})")
    assert avl.height <= 15
    assert avl.height <= max_avl_height(1000)
    assert count_nodes(avl.root) == 1000
    assert collect_violations(avl.root) == []
    print("  >> SUCESSO: Altura logarítmica mesmo com entrada ordenada.")

def test_height_bound_across_sizes():
    print("--- Teste: Limite de altura para vários tamanhos ---")

    rng = random.Random(11)
    heights = []
    for size in SIZES:
        avl = AVLTree()
        keys = list(range(size))
        rng.shuffle(keys)
        for key in keys:
            avl.insert(key, None)

        # Remove metade para exercitar o rebalanceamento na remoção
        for key in keys[: size // 2]:
            avl.delete(key)

        remaining = size - size // 2
        heights.append(avl.height)
        print(f"  n={remaining:5d}: altura {avl.height} (limite {max_avl_height(remaining):.2f})")
        assert avl.height <= max_avl_height(remaining)

    # Alturas crescem como log(n): razão altura/log2(n) estável
    ratios = np.array(heights) / np.log2(np.array(SIZES) - np.array(SIZES) // 2)
    print(f"  Razão média altura/log2(n): {np.mean(ratios):.3f}")
    assert np.max(ratios) < 1.5

def test_avl_search_complexity():
    """Mede o tempo médio de busca; só reporta, pois tempos variam por máquina."""
    print("\n--- Teste: Complexidade de Busca AVL ---")

    times = []
    for size in SIZES:
        avl = AVLTree()
        for i in range(size):
            avl.insert(i, i)

        search_keys = [random.randint(0, size - 1) for _ in range(100)]

        start = time.perf_counter()
        for key in search_keys:
            assert avl.search(key) == key
        elapsed = time.perf_counter() - start

        times.append(elapsed / 100)
        print(f"  n={size:5d}: {times[-1]*1000:.4f} ms/busca")

    ratios = [times[i+1]/times[i] for i in range(len(times)-1) if times[i] > 0]
    log_ratios = [math.log(SIZES[i+1])/math.log(SIZES[i]) for i in range(len(SIZES)-1)]

    if ratios:
        print(f"  Razão média de tempos: {np.mean(ratios):.3f}")
    print(f"  Razão média de log(n): {np.mean(log_ratios):.3f}")

if __name__ == "__main__":
    print("=" * 60)
    print("VALIDAÇÃO DE COMPLEXIDADE BIG-O")
    print("=" * 60)

    test_sequential_insert_height_bound()
    test_height_bound_across_sizes()
    test_avl_search_complexity()
