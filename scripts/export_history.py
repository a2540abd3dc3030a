import os

from obslog import autolog


def export_history(steps=100, seed=None, data_dir="data"):
    """Runs the default accumulation and writes the history and chart to `data_dir`."""
    os.makedirs(data_dir, exist_ok=True)

    df, _ = autolog(
        steps=steps,
        seed=seed,
        save_as=os.path.join(data_dir, "history.html"),
    )
    filepath = os.path.join(data_dir, "history.csv")
    df.to_csv(filepath, index=False)
    print("Saved", filepath)
    return df


if __name__ == "__main__":
    export_history(seed=0)
