import numpy as np
import matplotlib.pyplot as plt

from hera import generate_batch
from hera.constants import E_ELECTRON, MIN_ELECTRON_ENERGY

N = 20_000


def main():
    results = generate_batch(N, "ALL", allow_isr=True, seed=7)
    isr = [e for e in results["events"] if e.is_isr]
    E_gamma = np.array([e.E_gamma for e in isr])
    sqrt_s = np.sqrt([e.s for e in isr])

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(11, 4.5))

    ax1.hist(E_gamma, bins=50, range=(0.0, E_ELECTRON - MIN_ELECTRON_ENERGY),
             density=True, alpha=0.8, label="Accepted ISR events")
    ax1.axvline(E_ELECTRON - MIN_ELECTRON_ENERGY, color="r", ls="--", label="Photon energy ceiling")
    ax1.set_xlabel(r"$E_\gamma$ [GeV]")
    ax1.set_ylabel("Normalized counts")
    ax1.set_title("Toy ISR photon spectrum")
    ax1.grid(alpha=0.3)
    ax1.legend()

    ax2.hist(sqrt_s, bins=50, density=True, alpha=0.8, color="orange")
    ax2.set_xlabel(r"$\sqrt{s_{\mathrm{eff}}}$ [GeV]")
    ax2.set_ylabel("Normalized counts")
    ax2.set_title(f"Effective collision energy ({len(isr)}/{results['success']} ISR)")
    ax2.grid(alpha=0.3)

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
