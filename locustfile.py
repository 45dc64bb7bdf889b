from locust import HttpUser, task, between
import csv
import os
import random

# Load wallets from CSV (column: wallet); falls back to WALLETS env, comma-separated
wallets = []
if os.path.exists("wallets.csv"):
    with open("wallets.csv") as f:
        for row in csv.DictReader(f):
            wallets.append(row["wallet"])
if not wallets:
    wallets = [w.strip() for w in os.getenv("WALLETS", "").split(",") if w.strip()]


class ArcWalletUser(HttpUser):
    wait_time = between(1, 2)

    @task(5)
    def wallet_stats(self):
        if not wallets:
            return
        address = random.choice(wallets)
        self.client.get(
            "/api/wallet",
            params={"address": address},
            name="/api/wallet",
        )

    @task
    def preflight(self):
        self.client.options("/api/wallet", name="OPTIONS /api/wallet")
