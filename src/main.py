import json
import threading
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

from logger_config import setup_logger
import public_module
from settings.settings_provider import get_settings_store
from reports.report_builder import ReportFormat, create_builder
from reports.report_director import construct_report
from orders.order import Discount, Order, Product


def run_singleton_demo(logger) -> None:
    print("===== SINGLETON TEST =====")

    seen: Dict[str, int] = {}

    def worker() -> None:
        store = get_settings_store()
        name = threading.current_thread().name
        seen[name] = id(store)
        print(f"{name} instance id: {id(store)}")

    threads = [
        threading.Thread(target=worker, name=f"settings-worker-{i + 1}")
        for i in range(public_module.SINGLETON_WORKERS)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    logger.info(json.dumps({
        "EventCode": 0,
        "Message": f"Workers observed {len(set(seen.values()))} distinct SettingsStore instance(s)",
    }))

    store = get_settings_store()
    store.set("theme", "dark")
    store.load_simulated_database()
    store.save_to_file(public_module.SETTINGS_FILE)


def run_builder_demo(logger) -> None:
    print("\n===== BUILDER TEST =====")

    for fmt in public_module.REPORT_FORMATS:
        print(f"\n{fmt.upper()} REPORT:")
        builder = create_builder(fmt)
        report = construct_report(builder)
        report.show()

        if builder.fmt is ReportFormat.TEXT:
            report.update_content(public_module.REPORT_UPDATED_CONTENT)
            print("After update:")
            report.show()

    logger.info(json.dumps({
        "EventCode": 0,
        "Message": f"Built reports: {', '.join(public_module.REPORT_FORMATS)}",
    }))


def run_prototype_demo(logger) -> None:
    print("\n===== PROTOTYPE TEST =====")

    original = Order()
    original.add_product(Product("Phone", 500, 1))
    original.set_delivery_cost(30)
    original.set_discount(Discount(15))
    original.set_payment_method("Card")

    cloned = original.clone()
    cloned.products[0].set_quantity(5)
    cloned.set_discount(Discount(20))

    print("Original:")
    original.show()

    print("\nClone:")
    cloned.show()

    logger.info(json.dumps({"EventCode": 0, "Message": "Order cloned and modified independently"}))


def main() -> None:

    # Try the Docker volume location first
    env_path = Path("/data/.env")
    # Fallback for local dev
    if not env_path.exists():
        env_path = Path(__file__).resolve().parent / "data" / ".env"
    load_dotenv(dotenv_path=env_path)

    logger = setup_logger()
    logger.info(json.dumps({"EventCode": 0, "Message": "Starting pattern demo..."}))

    run_singleton_demo(logger)
    run_builder_demo(logger)
    run_prototype_demo(logger)

    logger.info(json.dumps({"EventCode": 0, "Message": "Pattern demo finished."}))


if __name__ == "__main__":
    main()
