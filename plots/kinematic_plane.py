import numpy as np
import matplotlib.pyplot as plt

from hera import SimulationRun, compute_limits

N_TICKS = 400
COLORS = {
    "HER": "#3b82f6",
    "MER": "#22c55e",
    "LER": "#ef4444",
    "ISR": "#eab308",
}


def main():
    run = SimulationRun(mode="ALL", allow_isr=True, seed=42)
    run.run(N_TICKS)
    groups = run.events_by_category()

    plt.figure(figsize=(8, 6))

    # y = 1 boundary per beam
    for beam, points in compute_limits().items():
        x = np.array([p.x for p in points])
        Q2 = np.array([p.Q2 for p in points])
        plt.plot(x, Q2, "--", color=COLORS[beam.value], label=f"{beam.value} limit (y = 1)")

    for key in ("HER", "MER", "LER", "ISR"):
        events = groups[key]
        if not events:
            continue
        label = "ISR (reduced √s)" if key == "ISR" else f"{key} DIS"
        plt.scatter([e.x for e in events], [e.Q2 for e in events],
                    s=6, alpha=0.7, color=COLORS[key], label=label)

    plt.xscale("log")
    plt.yscale("log")
    plt.xlim(1e-5, 1.0)
    plt.ylim(1.0, 1e5)
    plt.xlabel(r"Bjorken $x$")
    plt.ylabel(r"$Q^2$ [GeV$^2$]")
    plt.title(f"Kinematic plane: {len(run)} events, "
              f"L = {run.stats.integrated_luminosity:.2f} pb$^{{-1}}$")
    plt.grid(alpha=0.3, which="both")
    plt.legend(fontsize=8)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
