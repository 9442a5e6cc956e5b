class FixTag:
    # --- Fields the report reads ---
    ACCOUNT            = 1
    MSG_TYPE           = 35  # (e.g., D=New Order Single, 8=Execution Report)
    PRICE              = 44

    # --- Common fields that show up in order flow but are skipped ---
    CL_ORD_ID          = 11
    MSG_SEQ_NUM        = 34
    ORDER_QTY          = 38
    ORD_TYPE           = 40  # 1=Market, 2=Limit
    SENDER_COMP_ID     = 49
    SENDING_TIME       = 52
    SIDE               = 54  # 1=Buy, 2=Sell
    SYMBOL             = 55
    TARGET_COMP_ID     = 56
    TIME_IN_FORCE      = 59
    TRANSACT_TIME      = 60

    @classmethod
    def name_of(cls, tag: int) -> str:
        """Return the symbolic name for a tag number, or the number itself."""
        for name, value in vars(cls).items():
            if name.isupper() and value == tag:
                return name
        return str(tag)


class FixMsgType:
    EXECUTION_REPORT = "8"
    NEW_ORDER_SINGLE = "D"
