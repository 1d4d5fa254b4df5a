import numpy as np
import matplotlib.pyplot as plt

import elliptix

mc = 0.1
cache = elliptix.EllipticKCache(verbose=True)
k = cache(mc)

u = np.linspace(-4 * k, 4 * k, 1000)
sn, cn, dn, am = np.array([elliptix.sn_cn_dn_am(x, mc) for x in u]).T

plt.figure()
plt.plot(u / k, sn, label="sn")
plt.plot(u / k, cn, label="cn")
plt.plot(u / k, dn, label="dn")
plt.xlabel("u / K")
plt.legend()
plt.title(f"Jacobi elliptic functions, m = {1 - mc}")

phi = np.linspace(-2 * np.pi, 2 * np.pi, 500)
plt.figure()
for n in [0.0, 0.5, 0.9]:
    plt.plot(phi, [elliptix.elliptic_pi(x, n, mc) for x in phi], label=f"n = {n}")
plt.plot(phi, [elliptix.elliptic_e(x, mc) for x in phi], "--", label="E")
plt.xlabel(r"$\phi$")
plt.legend()
plt.title(r"$\Pi(\phi, n | m)$ and $E(\phi | m)$")

plt.figure()
plt.plot(u / k, am)
plt.xlabel("u / K")
plt.ylabel("am(u | m)")
plt.show()
