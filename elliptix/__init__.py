from .polynomial import horner, estrin, piecewise
from .complete import (
    elliptic_nome_q,
    elliptic_k,
    bulirsch_cel,
    fukushima_bd,
    fukushima_bdj,
)
from .jacobi import sn_cn_dn, sn_cn_dn_am
from .incomplete import (
    fukushima_t,
    fukushima_bs_ds_maclaurin,
    fukushima_js_maclaurin,
    fukushima_bs_ds_js,
    fukushima_bc_dc_jc,
    fukushima_bdj_incomplete,
)
from .legendre import (
    elliptic_f,
    elliptic_e,
    elliptic_pi,
    elliptic_fe_pi,
    complete_elliptic_e,
    complete_elliptic_pi,
)
from .handler import (
    ParameterDomainError,
    EllipticKCache,
    set_domain_checks,
    domain_checks_enabled,
    jacobi_functions,
    complete_first_kind,
    general_cel,
    complete_bd,
    complete_bdj,
    incomplete_bdj,
)
