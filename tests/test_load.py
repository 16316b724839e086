import asyncio
import time
from typing import List, Dict
import httpx
from faker import Faker
import random
import statistics

fake = Faker()
BASE_URL = "http://localhost:8080"

READ_PATHS = ["/stats", "/activity", "/contributions", "/repos"]


def random_featured() -> str:
    """Сгенерировать список избранных фрагментов имен через запятую."""
    return ",".join(fake.words(nb=random.randint(1, 3)))


async def get_json_api(client: httpx.AsyncClient, path: str, params: Dict | None = None):
    """GET запрос к сервису с проверкой статуса."""
    response = await client.get(f"{BASE_URL}{path}", params=params)
    response.raise_for_status()
    return response.json()


async def get_repos_api(client: httpx.AsyncClient):
    """Получить репозитории со случайными избранными и лимитом."""
    return await get_json_api(
        client,
        "/repos",
        params={"featured": random_featured(), "limit": random.randint(1, 20)},
    )


class RequestStats:
    def __init__(self, label: str):
        self.label = label
        self.count = 0
        self.server_errors = 0
        self.response_times: List[float] = []
        self.error_details: Dict[str, int] = {}

    def record_success(self, duration_ms: float):
        self.count += 1
        self.response_times.append(duration_ms)

    def record_error(self, error_type: str = "Unknown", http_status_code: int | None = None):
        self.count += 1
        self.error_details[error_type] = self.error_details.get(error_type, 0) + 1
        if http_status_code and 500 <= http_status_code < 600:
            self.server_errors += 1

    def print_results(self, test_duration: int):
        if not self.response_times and self.count == 0:
            print(f"\nРезультаты {self.label}: Нет данных.")
            return

        print(f"\nРезультаты {self.label}:")
        print(f"  Всего запросов: {self.count}")
        print(f"  Ошибок (5xx): {self.server_errors}")

        success_rate = (self.count - self.server_errors) / self.count * 100
        rps = self.count / test_duration
        print(f"  Успешность (без 5xx): {success_rate:.2f}%")
        print(f"  RPS: {rps:.2f}")

        if self.error_details:
            print(f"  Ошибки по типам: {self.error_details}")

        if self.response_times:
            avg_time = statistics.mean(self.response_times)
            sorted_times = sorted(self.response_times)
            p50 = sorted_times[len(sorted_times) // 2]
            p95 = sorted_times[int(len(sorted_times) * 0.95)]
            p99 = sorted_times[int(len(sorted_times) * 0.99)]
            print(
                f"  Время ответа (мс): среднее={avg_time:.2f}, P50={p50:.2f}, P95={p95:.2f}, P99={p99:.2f}, макс={max(sorted_times):.2f}"
            )


async def _execute_read_request(client: httpx.AsyncClient, stats: RequestStats):
    """Выполнить один случайный запрос и записать статистику."""
    req_start = time.time()
    try:
        path = random.choice(READ_PATHS)
        if path == "/repos":
            await get_repos_api(client)
        else:
            await get_json_api(client, path)

        stats.record_success((time.time() - req_start) * 1000)
    except httpx.HTTPStatusError as e:
        stats.record_error(f"HTTP_ERROR_{e.response.status_code}", e.response.status_code)
    except httpx.HTTPError as e:
        stats.record_error(type(e).__name__)


async def run_load_test(concurrent_reads: int = 20, test_duration: int = 30):
    """
    Нагрузочный тест запущенного сервиса.
    Каждый запрос проксируется в GitHub, поэтому длительность и параллелизм
    стоит держать в пределах лимита токена.
    """
    async with httpx.AsyncClient(timeout=30.0) as client:
        read_stats = RequestStats("тестирования чтения")
        end_time = time.time() + test_duration

        async def read_worker():
            while time.time() < end_time:
                await _execute_read_request(client, read_stats)
                await asyncio.sleep(0.05)

        print("Запуск нагрузочного тестирования...")
        await asyncio.gather(*[read_worker() for _ in range(concurrent_reads)])

        read_stats.print_results(test_duration)


if __name__ == "__main__":
    asyncio.run(run_load_test(concurrent_reads=20, test_duration=30))
