# udpresolver

This package runs a small name-resolution service over UDP and comes with an interactive client for it.

You send the server some text in a datagram. The server replies as follows:

- If the text is a dotted-quad IPv4 address such as `8.8.8.8`, the server does a reverse lookup. It replies with the primary hostname, then any other hostnames it finds through the addresses of that host. It lists at most 10 extra names.
- For any other text, the server does a forward lookup. It replies with every IPv4 address of the name, one per line, in the order the system resolver returns them.
- If the lookup fails, the server replies `Not found information`. This also happens for text made only of digits and dots that does not have exactly three dots, such as `1.2.3`.

The server appends every request to `log_server.txt` in the current directory. Each entry has this form:

```
[dd/mm/yyyy hh:mm:ss]$<request>$<+|-><result>
```

`+` marks a successful lookup and `-` marks a failed one. In the logged result, newlines are replaced by spaces. If the log file cannot be opened, the server prints an error on stderr and carries on.

## Installation

```
pip install .
```

## Running the server

```
udpresolver-server 5000
```

The server binds to all interfaces on the port you give. The port must be between 1 and 65535. The server prints each request and its result as they arrive, and it stops on Ctrl-C.

## Running the client

```
udpresolver-client 127.0.0.1 5000
```

The server address must be a dotted-quad IPv4 address. Type a domain name or an IPv4 address at the `>` prompt. To quit, press Enter on an empty line or send end-of-file. If the server does not answer within five seconds, the client reports a timeout and asks for the next query.

```
Connected to server 127.0.0.1:5000
Enter domain name or IP address (press Enter to quit):
> localhost
127.0.0.1
> 1.2.3
Not found information
>
Exiting...
```

## Using it from Python

```python
from udpresolver.client import ResolverClient
from udpresolver.lookup import Resolver
from udpresolver.server import process_request

print(process_request("localhost", Resolver()))

with ResolverClient("127.0.0.1", 5000, 5.0) as client:
    print(client.query("example.com"))
```

The modules are:

- `udpresolver.validation`: `is_valid_ipv4(text)` accepts only strict dotted-quad addresses.
- `udpresolver.lookup`: `Resolver` with `forward`, `reverse` and `additional_hostnames`. Lookups that fail raise `LookupError_`. The constructor takes the `getaddrinfo` and `getnameinfo` functions to use, so you can test without real DNS.
- `udpresolver.logger`: `RequestLog(path, clock)` appends entries. `format_entry(request, result, when)` builds one line.
- `udpresolver.server`: `ResolverServer(port, resolver, log, host)` with `handle_one`, `serve_forever`, `close` and an `address` property. It is also a context manager. The module also has `process_request` and `parse_port`.
- `udpresolver.client`: `ResolverClient(host, port, timeout)` with `query` and `close`, plus `run_interactive(client, stdin, stdout)`.

## Limitations

- Only IPv4 is supported, both for lookups and for the client and server sockets.
- Queries and replies are plain text. The server does not speak the DNS wire protocol, so standard DNS tools cannot query it.
- The server handles one request at a time.

## Tests

```
pip install .[test]
pytest
```