"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# Envelope keys
SRC = "src"
DEST = "dest"
BODY = "body"

# Body keys shared by every payload
TYPE = "type"
MSG_ID = "msg_id"
IN_REPLY_TO = "in_reply_to"

# Universal requests and their replies
ECHO = "echo"
ECHO_OK = "echo_ok"
INIT = "init"
INIT_OK = "init_ok"
GENERATE = "generate"
GENERATE_OK = "generate_ok"

# Workload requests and their replies
ADD = "add"
ADD_OK = "add_ok"
BROADCAST = "broadcast"
BROADCAST_OK = "broadcast_ok"
READ = "read"
READ_OK = "read_ok"
TOPOLOGY = "topology"
TOPOLOGY_OK = "topology_ok"
