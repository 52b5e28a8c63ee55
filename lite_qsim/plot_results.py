# lite_qsim/plot_results.py
import matplotlib.pyplot as plt

def basis_labels(dim):
    """Basis-state labels with wire 0 as the rightmost bit."""
    n = max(1, (dim - 1).bit_length())
    return [f"{i:0{n}b}" for i in range(dim)]

def plot_probabilities(probs, out_path, title="Measurement probabilities"):
    """Bar chart of a probability vector, saved to out_path."""
    labels = basis_labels(len(probs))
    fig = plt.figure(figsize=(max(4, 0.35 * len(probs)), 3))
    plt.bar(range(len(probs)), probs)
    plt.xticks(range(len(probs)), labels, rotation=90 if len(labels[0]) > 4 else 0)
    plt.ylim(0, 1)
    plt.xlabel("Basis state")
    plt.ylabel("Probability")
    plt.title(title)
    plt.grid(True, axis="y", ls="--", lw=0.5)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path
