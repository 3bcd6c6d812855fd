"""Register models for TPS6699x controllers."""