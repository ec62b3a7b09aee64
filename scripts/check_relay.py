import requests
import os
import argparse
import json

relay_base_url = os.getenv('RELAY_BASE_URL', 'http://localhost:8000')
relay_route_path = os.getenv('RELAY_ROUTE_PATH', '/api/proxy')


def send_query(target_url, query, variables=None):
    payload = {
        'targetUrl': target_url,
        'query': query,
        'variables': variables,
    }

    url = f'{relay_base_url}{relay_route_path}'

    response = requests.post(url, json=payload, timeout=60)

    if response.headers.get('X-Relay-Error'):
        print(f"Relay error with status code: {response.status_code}, "
              f"Message: {response.text}")
        return

    print(f'Upstream status: {response.status_code}')
    try:
        print(json.dumps(response.json(), indent=4))
    except ValueError:
        print(response.text)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Send a GraphQL query to a '
                                     'testnet node through the relay.')
    parser.add_argument('target_url', type=str, help='Node URL, must be on the relay allowlist.')
    parser.add_argument('--query', type=str, default='{ version }',
                        help='GraphQL query to send.')
    parser.add_argument('--variables', type=json.loads, default=None,
                        help='GraphQL variables as a JSON object.')
    args = parser.parse_args()

    send_query(args.target_url, args.query, args.variables)
