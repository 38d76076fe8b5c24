"""
Демонстрация шага скользящего окна step_slidify.
"""

import numpy as np
import pandas as pd

from tsrecipes.features.transformers import slidify_vec
from tsrecipes.recipes import Recipe, step_slidify


def generate_prices(n_days: int = 120, seed: int = 42) -> pd.DataFrame:
    """Сгенерировать случайные дневные цены."""
    np.random.seed(seed)
    return pd.DataFrame(
        {
            "date": pd.date_range("2024-01-01", periods=n_days, freq="1D"),
            "close": 100 + np.cumsum(np.random.randn(n_days)),
            "volume": np.random.randint(1000, 10000, n_days).astype(float),
        }
    )


def main():
    """Демонстрация работы шага."""
    print("=" * 80)
    print("Демонстрация скользящего окна")
    print("=" * 80)

    print("\n1. slidify_vec на коротком ряду:")
    values = [1, 2, 3, 4, 5, 6]
    for align in ("right", "center", "left"):
        full = slidify_vec(values, 3, np.mean, align=align)
        partial = slidify_vec(values, 3, np.mean, align=align, partial=True)
        print(f"   {align:>6}: {full}  partial={partial}")

    print("\n2. Рецепт: быстрая и медленная средние")
    history = generate_prices()
    recipe = (
        Recipe()
        .add_step(step_slidify("close", period=5, aggregate="mean", align="right", names=["ma_fast"]))
        .add_step(step_slidify("close", period=20, aggregate="mean", align="right", names=["ma_slow"]))
    )
    print(recipe.tidy().to_string(index=False))

    prepared = recipe.prep(history)
    for step in prepared.steps:
        print(f"   {step!r}")

    print("\n3. Применение к новым строкам:")
    future = generate_prices(n_days=10, seed=7)
    baked = prepared.bake(future)
    print(baked[["date", "close", "ma_fast", "ma_slow"]].round(2).to_string(index=False))

    signal = np.sign(baked["ma_fast"] - baked["ma_slow"])
    print(f"\n   Сигнал пересечения на последнем дне: {int(signal.iloc[-1])}")


if __name__ == "__main__":
    main()
