"""
Couche adaptateurs (infrastructure).

Sous-packages :
- api/ : clients HTTP de l'API Trakt (httpx), builders et endpoints
- cli/ : interface ligne de commande (Typer)

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
