"""Provider request and response types, and the Qianfan chat client."""