import matplotlib.pyplot as plt
from tsys.fluxmodel import *

fig, ax = plt.subplots()
plot_flux_model(J1939_6342_MEERKAT, 400, 10000, nu1=1e6, ax=ax, label='MeerKAT')
plot_flux_model(J1939_6342_ATCA, 400, 10000, nu1=1e9, ax=ax, label='ATCA')
ax.set_title('J1939-6342')
plt.show()
